# Error codes raised by the edition contracts.
# The contracts fail with the plain strings, tests refer to them through these.

def make_error_msg(prefix: str, message: str):
    return (prefix + message)

# Ownership and permissions
def only_owner(prefix=""):           return make_error_msg(prefix, "ONLY_OWNER")
def only_self(prefix=""):            return make_error_msg(prefix, "ONLY_SELF")
def only_unpaused(prefix=""):        return make_error_msg(prefix, "ONLY_UNPAUSED")
def not_allowed(prefix=""):          return make_error_msg(prefix, "NOT_ALLOWED")
def parameter_error(prefix=""):      return make_error_msg(prefix, "PARAM_ERROR")

# Initialization
def already_initialized(prefix=""):  return make_error_msg(prefix, "ALREADY_INITIALIZED")
def not_initialized(prefix=""):      return make_error_msg(prefix, "NOT_INITIALIZED")
def royalties_error(prefix=""):      return make_error_msg(prefix, "ROYALTIES_ERROR")
def shares_error(prefix=""):         return make_error_msg(prefix, "SHARES_ERROR")

# Minting and sale
def sold_out(prefix=""):             return make_error_msg(prefix, "SOLD_OUT")
def empty_list(prefix=""):           return make_error_msg(prefix, "EMPTY_LIST")
def not_for_sale(prefix=""):         return make_error_msg(prefix, "NOT_FOR_SALE")
def wrong_amount(prefix=""):         return make_error_msg(prefix, "WRONG_AMOUNT")
def no_amount(prefix=""):            return make_error_msg(prefix, "NO_AMOUNT")

# Revenue splitting
def nothing_due(prefix=""):          return make_error_msg(prefix, "NOTHING_DUE")
def not_payable(prefix=""):          return make_error_msg(prefix, "NOT_PAYABLE")

# FA2
def token_undefined(prefix=""):      return make_error_msg(prefix, "FA2_TOKEN_UNDEFINED")
def token_defined(prefix=""):        return make_error_msg(prefix, "FA2_TOKEN_DEFINED")
def not_operator(prefix=""):         return make_error_msg(prefix, "FA2_NOT_OPERATOR")
def not_owner(prefix=""):            return make_error_msg(prefix, "FA2_NOT_OWNER")
def insufficient_balance(prefix=""): return make_error_msg(prefix, "FA2_INSUFFICIENT_BALANCE")
