import smartpy as sp

from editions.mixins.Ownable import ownable


@sp.module
def royalty_reporter():
    import ownable

    t_royalty_info_params: type = sp.record(
        token_id=sp.nat, sale_price=sp.nat
    ).layout(("token_id", "sale_price"))

    t_royalty_info: type = sp.record(
        receiver=sp.address, amount=sp.nat
    ).layout(("receiver", "amount"))

    # Interop royalties, shares relative to total.
    t_royalties_interop: type = sp.record(
        total=sp.nat,
        shares=sp.map[sp.address, sp.nat]
    ).layout(("total", "shares"))

    class Royalties(ownable.Ownable):
        """(Mixin) Advisory royalty quotes for marketplaces.

        The same basis points apply to every token and are paid to
        the current owner. Nothing is enforced or transferred here.
        """
        def __init__(self, owner):
            ownable.Ownable.__init__(self, owner)
            self.data.royalties = sp.nat(0)

        @sp.onchain_view
        def royalty_info(self, params):
            """ERC-2981 style quote: who gets how much of `sale_price`."""
            sp.cast(params, t_royalty_info_params)
            null = sp.address("tz1Ke2h7sDdakHJQh8WX4Z372du1KChsksyU")
            result = sp.record(receiver=null, amount=sp.nat(0))
            if (self.data.owner != null) and (self.data.royalties > 0):
                result = sp.record(
                    receiver=self.data.owner,
                    amount=params.sale_price * self.data.royalties / 10000)
            return sp.cast(result, t_royalty_info)

        @sp.onchain_view
        def get_royalties(self, token_id):
            """Returns the token royalties information, including total shares."""
            sp.cast(token_id, sp.nat)
            shares = sp.cast({}, sp.map[sp.address, sp.nat])
            if (self.data.owner != sp.address("tz1Ke2h7sDdakHJQh8WX4Z372du1KChsksyU")) and (self.data.royalties > 0):
                shares[self.data.owner] = self.data.royalties
            return sp.cast(sp.record(total=10000, shares=shares), t_royalties_interop)

        @sp.onchain_view
        def get_royalties_bps(self):
            return self.data.royalties
