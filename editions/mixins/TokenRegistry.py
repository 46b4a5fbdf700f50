"""
FA2 NFT ledger: https://gitlab.com/tezos/tzip/-/blob/master/proposals/tzip-12/tzip-12.md.

One address per token id, owner-or-operator transfer policy, burn.
Ids are assigned by the contract using the mixin, `mint_token` only records them.
"""

import smartpy as sp


@sp.module
def token_registry():
    #########
    # Types #
    #########

    t_operator_permission: type = sp.record(
        owner=sp.address, operator=sp.address, token_id=sp.nat
    ).layout(("owner", ("operator", "token_id")))

    t_update_operators_params: type = sp.list[
        sp.variant(
            add_operator=t_operator_permission,
            remove_operator=t_operator_permission
        )
    ]

    t_transfer_tx: type = sp.record(
        to_=sp.address,
        token_id=sp.nat,
        amount=sp.nat,
    ).layout(("to_", ("token_id", "amount")))

    t_transfer_batch: type = sp.record(
        from_=sp.address,
        txs=sp.list[t_transfer_tx],
    ).layout(("from_", "txs"))

    t_transfer_params: type = sp.list[t_transfer_batch]

    t_balance_request: type = sp.record(
        owner=sp.address, token_id=sp.nat
    ).layout(("owner", "token_id"))

    t_mint_token: type = sp.record(token_id=sp.nat, to_=sp.address)


    class TokenRegistry(sp.Contract):
        """(Mixin) NFT ownership, operators, transfer and burn.

        Keeps a per-address count of owned tokens for ERC-721 style
        balance queries and a count of burned tokens.
        """
        def __init__(self):
            self.data.ledger = sp.cast(sp.big_map(), sp.big_map[sp.nat, sp.address])
            self.data.operators = sp.cast(sp.big_map(), sp.big_map[t_operator_permission, sp.unit])
            self.data.owned = sp.cast(sp.big_map(), sp.big_map[sp.address, sp.nat])
            self.data.burned = sp.nat(0)

        #
        # Inline helpers
        #
        @sp.private(with_storage="read-write", with_operations=True)
        def mint_token(self, params):
            """Records `params.to_` as owner of the new `params.token_id`."""
            sp.cast(params, t_mint_token)
            assert not (params.token_id in self.data.ledger), "FA2_TOKEN_DEFINED"
            self.data.ledger[params.token_id] = params.to_
            self.data.owned[params.to_] = self.data.owned.get(params.to_, default=0) + 1
            sp.emit(sp.record(
                from_=sp.address("tz1Ke2h7sDdakHJQh8WX4Z372du1KChsksyU"),
                to_=params.to_,
                token_id=params.token_id), tag="transfer")

        #
        # Public entry points
        #
        @sp.entrypoint
        def transfer(self, batch):
            """Accept a list of transfers from a source to multiple
            destinations. Only the owner or one of its operators can
            move a token."""
            sp.cast(batch, t_transfer_params)
            for transfer_ in batch:
                for tx in transfer_.txs:
                    # The ordering of asserts is important: 1) token_undefined, 2) transfer permission 3) balance
                    assert tx.token_id in self.data.ledger, "FA2_TOKEN_UNDEFINED"
                    assert (sp.sender == transfer_.from_) or (sp.record(owner=transfer_.from_, operator=sp.sender, token_id=tx.token_id) in self.data.operators), "FA2_NOT_OPERATOR"
                    if tx.amount > 0:
                        assert (tx.amount == 1) and (self.data.ledger[tx.token_id] == transfer_.from_), "FA2_INSUFFICIENT_BALANCE"
                        self.data.ledger[tx.token_id] = tx.to_
                        self.data.owned[transfer_.from_] = sp.as_nat(self.data.owned.get(transfer_.from_, default=0) - 1)
                        self.data.owned[tx.to_] = self.data.owned.get(tx.to_, default=0) + 1
                        sp.emit(sp.record(from_=transfer_.from_, to_=tx.to_, token_id=tx.token_id), tag="transfer")

        @sp.entrypoint
        def update_operators(self, actions):
            """Add or remove operators allowed to transfer or burn
            a single token on behalf of its owner."""
            sp.cast(actions, t_update_operators_params)
            for action in actions:
                match action:
                    case add_operator(operator):
                        assert operator.owner == sp.sender, "FA2_NOT_OWNER"
                        self.data.operators[operator] = ()
                    case remove_operator(operator):
                        assert operator.owner == sp.sender, "FA2_NOT_OWNER"
                        del self.data.operators[operator]

        @sp.entrypoint
        def burn(self, token_id):
            """Burning removes the token from the ledger. The id is
            never handed out again."""
            sp.cast(token_id, sp.nat)
            assert token_id in self.data.ledger, "FA2_TOKEN_UNDEFINED"
            holder = self.data.ledger[token_id]
            assert (sp.sender == holder) or (sp.record(owner=holder, operator=sp.sender, token_id=token_id) in self.data.operators), "FA2_NOT_OPERATOR"
            del self.data.ledger[token_id]
            self.data.owned[holder] = sp.as_nat(self.data.owned.get(holder, default=0) - 1)
            self.data.burned += 1
            sp.emit(sp.record(
                from_=holder,
                to_=sp.address("tz1Ke2h7sDdakHJQh8WX4Z372du1KChsksyU"),
                token_id=token_id), tag="transfer")

        #
        # Views
        #
        @sp.onchain_view
        def get_balance(self, params):
            """Return the balance of an address for the specified `token_id`."""
            sp.cast(params, t_balance_request)
            assert params.token_id in self.data.ledger, "FA2_TOKEN_UNDEFINED"
            balance = sp.nat(0)
            if self.data.ledger[params.token_id] == params.owner:
                balance = sp.nat(1)
            return balance

        @sp.onchain_view
        def get_token_owner(self, token_id):
            """Return the owner for the given `token_id`."""
            sp.cast(token_id, sp.nat)
            assert token_id in self.data.ledger, "FA2_TOKEN_UNDEFINED"
            return self.data.ledger[token_id]

        @sp.onchain_view
        def is_operator(self, params):
            sp.cast(params, t_operator_permission)
            return params in self.data.operators

        @sp.onchain_view
        def count_owned(self, owner):
            """Number of tokens held by `owner`."""
            sp.cast(owner, sp.address)
            return self.data.owned.get(owner, default=0)
