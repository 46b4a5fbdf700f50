import smartpy as sp

from editions.ME_Edition import edition
from editions.ME_EditionFactory import edition_factory
from editions.utils import ErrorMessages, Utils


@sp.add_test()
def test():
    admin   = sp.test_account("Administrator")
    artist  = sp.test_account("Artist")
    curator = sp.test_account("Curator")
    alice   = sp.test_account("Alice")
    bob     = sp.test_account("Robert")
    scenario = sp.test_scenario("ME_EditionFactory_tests", edition_factory)

    scenario.h1("EditionFactory contract")
    scenario.h2("Test EditionFactory")

    scenario.h3("Contract origination")
    factory = edition_factory.EditionFactory(admin.address,
        Utils.metadata_of_url("ipfs://QmFactory"), Utils.bytes_of_string("ipfs://QmEditionMetadata"))
    scenario += factory

    scenario.verify(factory.get_instances() == 0)
    scenario.verify(factory.data.paused == False)

    #
    # create_edition
    #
    scenario.h3("create_edition")

    params = Utils.edition_params(artist.address, name="Sunrise", symbol="SUN",
        content_url="ipfs://QmSunrise", content_type="image/png",
        size=10, royalties=500, shares=[Utils.share(curator.address, 200)])

    # Editions can only be created for the sender.
    factory.create_edition(params, _sender=bob, _valid=False, _exception=ErrorMessages.parameter_error())

    factory.create_edition(params, _sender=artist)
    scenario.verify(factory.get_instances() == 1)

    dyn_edition = scenario.dynamic_contract(edition.Edition)
    scenario.verify(factory.get_edition(0) == dyn_edition.address)

    # Initialized and handed over to the artist.
    scenario.verify(dyn_edition.data.initialized == True)
    scenario.verify(dyn_edition.data.owner == artist.address)
    scenario.verify(dyn_edition.data.size == 10)
    scenario.verify(dyn_edition.data.royalties == 500)
    scenario.verify(dyn_edition.data.shares[curator.address] == 200)
    scenario.verify(dyn_edition.data.shares[artist.address] == 9800)
    scenario.verify(dyn_edition.data.metadata[""] == Utils.bytes_of_string("ipfs://QmEditionMetadata"))

    # The artist can use it right away.
    dyn_edition.mint_editions([alice.address, bob.address], _sender=artist)
    scenario.verify(dyn_edition.data.ledger[2] == bob.address)
    dyn_edition.initialize(params, _sender=artist, _valid=False, _exception=ErrorMessages.already_initialized())

    # Invalid parameters revert the creation.
    bad_params = Utils.edition_params(artist.address, royalties=10000)
    factory.create_edition(bad_params, _sender=artist, _valid=False, _exception=ErrorMessages.royalties_error())
    scenario.verify(factory.get_instances() == 1)

    # Creation indices are dense.
    factory.create_edition(Utils.edition_params(alice.address), _sender=alice)
    scenario.verify(factory.get_instances() == 2)
    dyn_edition2 = scenario.dynamic_contract(edition.Edition)
    scenario.verify(factory.get_edition(1) == dyn_edition2.address)
    scenario.verify(dyn_edition2.data.owner == alice.address)
    scenario.verify(dyn_edition2.data.shares[alice.address] == 10000)

    #
    # initialize_edition
    #
    scenario.h3("initialize_edition")

    for acc in [admin, artist, bob]:
        factory.initialize_edition(sp.record(edition=dyn_edition.address, params=params), _sender=acc,
            _valid=False, _exception=ErrorMessages.only_self())

    #
    # set_paused
    #
    scenario.h3("set_paused")

    # No permission for anyone but owner
    for acc in [alice, bob, admin]:
        factory.set_paused(True, _sender=acc,
            _valid=(True if acc is admin else False),
            **({} if acc is admin else {"_exception": ErrorMessages.only_owner()}))
    scenario.verify(factory.data.paused == True)

    factory.create_edition(params, _sender=artist, _valid=False, _exception=ErrorMessages.only_unpaused())

    factory.set_paused(False, _sender=admin)
    factory.create_edition(params, _sender=artist)
    scenario.verify(factory.get_instances() == 3)

    #
    # set_edition_metadata
    #
    scenario.h3("set_edition_metadata")

    factory.set_edition_metadata(Utils.bytes_of_string("ipfs://QmNew"), _sender=bob, _valid=False, _exception=ErrorMessages.only_owner())
    factory.set_edition_metadata(Utils.bytes_of_string("ipfs://QmNew"), _sender=admin)
    scenario.verify(factory.data.edition_metadata == Utils.bytes_of_string("ipfs://QmNew"))
