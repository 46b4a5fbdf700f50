import smartpy as sp

from editions.mixins.Ownable import ownable
from editions.mixins.TokenRegistry import token_registry
from editions.ME_Edition import edition


# Creates and initializes editions, keeps a registry of their addresses.

@sp.module
def edition_factory():
    import ownable
    import token_registry
    import edition

    t_initialize_edition: type = sp.record(
        edition=sp.address,
        params=edition.t_edition_params
    ).layout(("edition", "params"))

    class EditionFactory(ownable.Ownable):
        """Originates editions on behalf of artists.

        A new edition is originated with the factory as initializer and
        initialized in a follow-up self call, since an address can only
        be called once its origination has been applied.
        """
        def __init__(self, administrator, metadata, edition_metadata):
            ownable.Ownable.__init__(self, administrator)

            self.data.metadata = sp.cast(metadata, sp.big_map[sp.string, sp.bytes])
            # TZIP-16 metadata uri set on every edition created.
            self.data.edition_metadata = sp.cast(edition_metadata, sp.bytes)
            self.data.paused = False
            self.data.instances = sp.nat(0)
            self.data.editions = sp.cast(sp.big_map(), sp.big_map[sp.nat, sp.address])

        #
        # Admin-only entry points
        #
        @sp.entrypoint
        def set_paused(self, paused):
            sp.cast(paused, sp.bool)
            assert sp.sender == self.data.owner, "ONLY_OWNER"
            self.data.paused = paused

        @sp.entrypoint
        def set_edition_metadata(self, edition_metadata):
            sp.cast(edition_metadata, sp.bytes)
            assert sp.sender == self.data.owner, "ONLY_OWNER"
            self.data.edition_metadata = edition_metadata

        #
        # Public entry points
        #
        @sp.entrypoint
        def create_edition(self, params):
            """Creates an edition owned by the sender."""
            sp.cast(params, edition.t_edition_params)
            assert not self.data.paused, "ONLY_UNPAUSED"
            assert params.owner == sp.sender, "PARAM_ERROR"

            edition_address = sp.create_contract(edition.Edition, None, sp.mutez(0), sp.record(
                owner=sp.self_address,
                ledger=sp.cast(sp.big_map(), sp.big_map[sp.nat, sp.address]),
                operators=sp.cast(sp.big_map(), sp.big_map[token_registry.t_operator_permission, sp.unit]),
                owned=sp.cast(sp.big_map(), sp.big_map[sp.address, sp.nat]),
                burned=sp.nat(0),
                shares=sp.cast({}, sp.map[sp.address, sp.nat]),
                withdrawn=sp.cast(sp.big_map(), sp.big_map[sp.address, sp.mutez]),
                total_withdrawn=sp.mutez(0),
                royalties=sp.nat(0),
                metadata=sp.big_map({"": self.data.edition_metadata}),
                initialized=False,
                name=sp.bytes("0x"),
                symbol=sp.bytes("0x"),
                description=sp.bytes("0x"),
                content_url=sp.bytes("0x"),
                content_hash=sp.bytes("0x"),
                content_type=sp.bytes("0x"),
                thumbnail_url=sp.bytes("0x"),
                size=sp.nat(0),
                next_id=sp.nat(1),
                price=sp.mutez(0),
                allowed_minters=sp.cast(sp.big_map(), sp.big_map[sp.address, sp.nat])))

            self.data.editions[self.data.instances] = edition_address
            sp.emit(sp.record(
                id=self.data.instances,
                edition=edition_address,
                creator=sp.sender), tag="edition_created")
            self.data.instances += 1

            sp.transfer(
                sp.record(edition=edition_address, params=params),
                sp.mutez(0),
                sp.self_entrypoint("initialize_edition"))

        @sp.entrypoint
        def initialize_edition(self, params):
            sp.cast(params, t_initialize_edition)
            assert sp.sender == sp.self_address, "ONLY_SELF"
            initialize_handle = sp.contract(
                edition.t_edition_params,
                params.edition,
                entrypoint="initialize").unwrap_some()
            sp.transfer(params.params, sp.mutez(0), initialize_handle)

        #
        # Views
        #
        @sp.onchain_view
        def get_edition(self, id):
            """Address of the edition with creation index `id`."""
            sp.cast(id, sp.nat)
            assert id < self.data.instances, "PARAM_ERROR"
            return self.data.editions[id]

        @sp.onchain_view
        def get_instances(self) -> sp.nat:
            return self.data.instances
