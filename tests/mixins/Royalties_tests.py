import smartpy as sp

from editions.mixins.Royalties import royalty_reporter
from editions.utils import Utils


@sp.module
def testing():
    import royalty_reporter

    class RoyaltiesTest(royalty_reporter.Royalties):
        def __init__(self, owner, royalties):
            royalty_reporter.Royalties.__init__(self, owner)
            self.data.royalties = royalties


@sp.add_test()
def test():
    admin = sp.test_account("Administrator")
    alice = sp.test_account("Alice")
    scenario = sp.test_scenario("Royalties_tests", testing)

    scenario.h1("Royalties contract")

    scenario.h2("Test Royalties")

    scenario.h3("Contract origination")
    c = testing.RoyaltiesTest(admin.address, sp.nat(250))
    scenario += c

    #
    # royalty_info
    #
    scenario.h3("royalty_info")

    for sale_price, amount in [(0, 0), (39, 0), (40, 1), (10000, 250), (1000000, 25000)]:
        info = sp.View(c, "royalty_info")(sp.record(token_id=1, sale_price=sale_price))
        scenario.verify(info.receiver == admin.address)
        scenario.verify(info.amount == amount)

    # Follows the owner.
    c.transfer_ownership(alice.address, _sender=admin)
    scenario.verify(sp.View(c, "royalty_info")(sp.record(token_id=7, sale_price=10000)).receiver == alice.address)

    #
    # get_royalties
    #
    scenario.h3("get_royalties")

    royalties = sp.View(c, "get_royalties")(1)
    scenario.verify(royalties.total == 10000)
    scenario.verify(royalties.shares[alice.address] == 250)
    scenario.verify(sp.len(royalties.shares) == 1)
    scenario.verify(sp.View(c, "get_royalties_bps")() == 250)

    # No receiver once renounced.
    c.renounce_ownership(_sender=alice)
    info = sp.View(c, "royalty_info")(sp.record(token_id=1, sale_price=10000))
    scenario.verify(info.receiver == Utils.null_address())
    scenario.verify(info.amount == 0)
    scenario.verify(sp.len(sp.View(c, "get_royalties")(1).shares) == 0)

    # Nor with zero royalties.
    c = testing.RoyaltiesTest(admin.address, sp.nat(0))
    scenario += c
    info = sp.View(c, "royalty_info")(sp.record(token_id=1, sale_price=10000))
    scenario.verify(info.receiver == Utils.null_address())
    scenario.verify(info.amount == 0)
