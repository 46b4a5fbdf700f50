import smartpy as sp


@sp.module
def revenue_splitter():
    t_release: type = sp.record(account=sp.address, total_received=sp.mutez)

    class RevenueSplitter(sp.Contract):
        """(Mixin) Pull payments proportional to basis point shares.

        A shareholder is owed `floor(total_received * bps / 10000)`
        minus what it already withdrew, where `total_received` is the
        current balance plus everything ever withdrawn. Dust left by
        the floor stays in the balance until receipts grow.

        Shares are set up by the contract using the mixin and are
        expected to sum to 10000.
        """
        def __init__(self):
            self.data.shares = sp.cast({}, sp.map[sp.address, sp.nat])
            self.data.withdrawn = sp.cast(sp.big_map(), sp.big_map[sp.address, sp.mutez])
            self.data.total_withdrawn = sp.mutez(0)

        #
        # Inline helpers
        #
        @sp.private(with_storage="read-only")
        def amount_due(self, params):
            sp.cast(params, t_release)
            entitled = sp.split_tokens(params.total_received, self.data.shares.get(params.account, default=0), 10000)
            return entitled - self.data.withdrawn.get(params.account, default=sp.mutez(0))

        @sp.private(with_storage="read-write")
        def record_release(self, params):
            """Book a payment before the transfer is emitted."""
            sp.cast(params, sp.record(account=sp.address, amount=sp.mutez))
            self.data.withdrawn[params.account] = self.data.withdrawn.get(params.account, default=sp.mutez(0)) + params.amount
            self.data.total_withdrawn += params.amount

        #
        # Public entry points
        #
        @sp.entrypoint
        def default(self):
            """Accepts tez from any source, it all counts as revenue."""
            pass

        @sp.entrypoint
        def withdraw(self, account):
            """Pay `account` everything it is owed. Anyone can call this,
            the funds always go to `account`."""
            sp.cast(account, sp.address)
            assert sp.amount == sp.mutez(0), "NO_AMOUNT"

            # Balance doesn't move during the call, compute receipts once.
            total_received = sp.balance + self.data.total_withdrawn
            due = self.amount_due(sp.record(account=account, total_received=total_received))
            assert due > sp.mutez(0), "NOTHING_DUE"

            receiver = sp.contract(sp.unit, account).unwrap_some(error="NOT_PAYABLE")
            self.record_release(sp.record(account=account, amount=due))
            sp.transfer((), due, receiver)
            sp.emit(sp.record(account=account, amount=due), tag="payment_released")

        @sp.entrypoint
        def withdraw_all(self):
            """Best effort payout to every shareholder.

            Only implicit accounts are paid here, they can't refuse tez.
            Contract shareholders and accounts owed nothing are skipped
            with a `payment_failed` event. Contracts use `withdraw`.
            """
            assert sp.amount == sp.mutez(0), "NO_AMOUNT"

            total_received = sp.balance + self.data.total_withdrawn
            for account in self.data.shares.keys():
                due = self.amount_due(sp.record(account=account, total_received=total_received))
                if due == sp.mutez(0):
                    sp.emit(sp.record(account=account, amount=due, reason="NOTHING_DUE"), tag="payment_failed")
                else:
                    if sp.is_implicit_account(account).is_some():
                        self.record_release(sp.record(account=account, amount=due))
                        sp.transfer((), due, sp.contract(sp.unit, account).unwrap_some())
                        sp.emit(sp.record(account=account, amount=due), tag="payment_released")
                    else:
                        sp.emit(sp.record(account=account, amount=due, reason="NOT_IMPLICIT"), tag="payment_failed")

        #
        # Views
        #
        @sp.onchain_view
        def get_shares(self, account):
            """Basis points held by `account`, 0 if not a shareholder."""
            sp.cast(account, sp.address)
            return self.data.shares.get(account, default=0)

        @sp.onchain_view
        def get_shareholders(self):
            return self.data.shares.keys()

        @sp.onchain_view
        def get_withdrawn(self, account):
            sp.cast(account, sp.address)
            return self.data.withdrawn.get(account, default=sp.mutez(0))

        @sp.onchain_view
        def get_total_received(self):
            return sp.balance + self.data.total_withdrawn

        @sp.onchain_view
        def get_amount_due(self, account):
            sp.cast(account, sp.address)
            entitled = sp.split_tokens(sp.balance + self.data.total_withdrawn, self.data.shares.get(account, default=0), 10000)
            return entitled - self.data.withdrawn.get(account, default=sp.mutez(0))
