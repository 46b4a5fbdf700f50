import smartpy as sp

from editions.mixins.Ownable import ownable
from editions.utils import ErrorMessages, Utils


@sp.add_test()
def test():
    admin = sp.test_account("Administrator")
    alice = sp.test_account("Alice")
    bob   = sp.test_account("Robert")
    scenario = sp.test_scenario("Ownable_tests", ownable)

    scenario.h1("Ownable contract")
    scenario.h2("Test Ownable")

    scenario.h3("Contract origination")
    c = ownable.Ownable(admin.address)
    scenario += c

    scenario.verify(c.get_owner() == admin.address)

    #
    # transfer_ownership
    #
    scenario.h3("transfer_ownership")

    # No permission for anyone but owner
    for acc in [alice, bob, admin]:
        c.transfer_ownership(alice.address, _sender=acc,
            _valid=(True if acc is admin else False),
            **({} if acc is admin else {"_exception": ErrorMessages.only_owner()}))

    scenario.verify(c.get_owner() == alice.address)
    c.transfer_ownership(admin.address, _sender=admin, _valid=False, _exception=ErrorMessages.only_owner())

    #
    # renounce_ownership
    #
    scenario.h3("renounce_ownership")

    c.renounce_ownership(_sender=admin, _valid=False, _exception=ErrorMessages.only_owner())
    c.renounce_ownership(_sender=alice)
    scenario.verify(c.get_owner() == Utils.null_address())

    # Renouncing is final.
    for acc in [alice, bob, admin]:
        c.transfer_ownership(acc.address, _sender=acc, _valid=False, _exception=ErrorMessages.only_owner())
        c.renounce_ownership(_sender=acc, _valid=False, _exception=ErrorMessages.only_owner())
