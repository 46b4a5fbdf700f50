import smartpy as sp


@sp.module
def ownable():
    class Ownable(sp.Contract):
        """(Mixin) Single owner with administrative rights.

        Renouncing sets the owner to the null address, which
        disables every owner-only entrypoint for good.
        """
        def __init__(self, owner):
            self.data.owner = sp.cast(owner, sp.address)

        @sp.entrypoint
        def transfer_ownership(self, new_owner):
            sp.cast(new_owner, sp.address)
            assert sp.sender == self.data.owner, "ONLY_OWNER"
            sp.emit(sp.record(previous=self.data.owner, new=new_owner), tag="ownership_transferred")
            self.data.owner = new_owner

        @sp.entrypoint
        def renounce_ownership(self):
            assert sp.sender == self.data.owner, "ONLY_OWNER"
            null = sp.address("tz1Ke2h7sDdakHJQh8WX4Z372du1KChsksyU")
            sp.emit(sp.record(previous=self.data.owner, new=null), tag="ownership_transferred")
            self.data.owner = null

        @sp.onchain_view
        def get_owner(self) -> sp.address:
            return self.data.owner
