import smartpy as sp

from editions.mixins.TokenRegistry import token_registry
from editions.mixins.RevenueSplitter import revenue_splitter
from editions.mixins.Royalties import royalty_reporter


# An edition is a single piece of content minted as a numbered series
# of NFTs. Ids start at 1 and are dense. Sales proceeds and any other
# incoming tez are split between the shareholders.

@sp.module
def edition():
    import token_registry
    import revenue_splitter
    import royalty_reporter

    t_share: type = sp.record(
        holder=sp.address, bps=sp.nat
    ).layout(("holder", "bps"))

    t_minter: type = sp.record(
        minter=sp.address, amount=sp.nat
    ).layout(("minter", "amount"))

    t_edition_params: type = sp.record(
        owner=sp.address,
        name=sp.bytes,
        symbol=sp.bytes,
        description=sp.bytes,
        content_url=sp.bytes,
        content_hash=sp.bytes,
        content_type=sp.bytes,
        thumbnail_url=sp.bytes,
        size=sp.nat,
        royalties=sp.nat,
        shares=sp.list[t_share]
    )

    t_uri: type = sp.record(
        content_url=sp.bytes,
        content_hash=sp.bytes,
        thumbnail_url=sp.bytes
    ).layout(("content_url", ("content_hash", "thumbnail_url")))

    t_token_metadata: type = sp.record(
        token_id=sp.nat,
        token_info=sp.map[sp.string, sp.bytes]
    ).layout(("token_id", "token_info"))

    class Edition(
        token_registry.TokenRegistry,
        revenue_splitter.RevenueSplitter,
        royalty_reporter.Royalties):
        """Edition of NFTs sharing the same content.

        Originated uninitialized with `initializer` as owner. Only
        `initialize`, called once by the initializer, configures the
        edition and hands it over to the artist.
        """
        def __init__(self, initializer, metadata):
            royalty_reporter.Royalties.__init__(self, initializer)
            revenue_splitter.RevenueSplitter.__init__(self)
            token_registry.TokenRegistry.__init__(self)

            self.data.metadata = sp.cast(metadata, sp.big_map[sp.string, sp.bytes])
            self.data.initialized = False
            self.data.name = sp.bytes("0x")
            self.data.symbol = sp.bytes("0x")
            self.data.description = sp.bytes("0x")
            self.data.content_url = sp.bytes("0x")
            self.data.content_hash = sp.bytes("0x")
            self.data.content_type = sp.bytes("0x")
            self.data.thumbnail_url = sp.bytes("0x")
            self.data.size = sp.nat(0)
            self.data.next_id = sp.nat(1)
            self.data.price = sp.mutez(0)
            # The null address as key enables public minting.
            self.data.allowed_minters = sp.cast(sp.big_map(), sp.big_map[sp.address, sp.nat])

        #
        # Inline helpers
        #
        @sp.private(with_storage="read-write")
        def reserve_ids(self, count):
            """Advances the id counter by `count`, returns the first id."""
            sp.cast(count, sp.nat)
            assert self.data.initialized, "NOT_INITIALIZED"
            first_id = self.data.next_id
            if self.data.size != 0:
                assert first_id + count <= self.data.size + 1, "SOLD_OUT"
            self.data.next_id += count
            return first_id

        #
        # Initialization
        #
        @sp.entrypoint
        def initialize(self, params):
            """Configures the edition and transfers ownership to `params.owner`.

            Shareholders get their explicit basis points, the owner the
            remainder. The owner may not be listed and must keep a share.
            """
            sp.cast(params, t_edition_params)
            assert not self.data.initialized, "ALREADY_INITIALIZED"
            assert sp.sender == self.data.owner, "ONLY_OWNER"
            assert params.royalties < 10000, "ROYALTIES_ERROR"

            total = sp.nat(0)
            for share in params.shares:
                assert share.bps > 0, "SHARES_ERROR"
                assert share.holder != params.owner, "SHARES_ERROR"
                assert not (share.holder in self.data.shares), "SHARES_ERROR"
                self.data.shares[share.holder] = share.bps
                total += share.bps
            assert total < 10000, "SHARES_ERROR"
            self.data.shares[params.owner] = sp.as_nat(10000 - total)

            self.data.name = params.name
            self.data.symbol = params.symbol
            self.data.description = params.description
            self.data.content_url = params.content_url
            self.data.content_hash = params.content_hash
            self.data.content_type = params.content_type
            self.data.thumbnail_url = params.thumbnail_url
            self.data.size = params.size
            self.data.royalties = params.royalties

            sp.emit(sp.record(previous=self.data.owner, new=params.owner), tag="ownership_transferred")
            self.data.owner = params.owner
            self.data.initialized = True

        #
        # Minting
        #
        @sp.entrypoint
        def mint_edition(self):
            """Mints the next token to the sender.

            Open to the owner, to anyone while public minting is on, and
            otherwise to approved minters, whose quota is used up by one.
            """
            null = sp.address("tz1Ke2h7sDdakHJQh8WX4Z372du1KChsksyU")
            if (sp.sender != self.data.owner) and (self.data.allowed_minters.get(null, default=0) == 0):
                quota = self.data.allowed_minters.get(sp.sender, default=0)
                assert quota > 0, "NOT_ALLOWED"
                self.data.allowed_minters[sp.sender] = sp.as_nat(quota - 1)

            token_id = self.reserve_ids(1)
            self.mint_token(sp.record(token_id=token_id, to_=sp.sender))

        @sp.entrypoint
        def mint_editions(self, recipients):
            """Mints one token to each recipient, in order. All or nothing."""
            sp.cast(recipients, sp.list[sp.address])
            assert sp.sender == self.data.owner, "ONLY_OWNER"
            assert sp.len(recipients) > 0, "EMPTY_LIST"

            token_id = self.reserve_ids(sp.len(recipients))
            for to_ in recipients:
                self.mint_token(sp.record(token_id=token_id, to_=to_))
                token_id += 1

        @sp.entrypoint
        def purchase(self):
            """Buys the next token at the listed price. The payment stays
            in the contract until shareholders withdraw it."""
            assert self.data.price > sp.mutez(0), "NOT_FOR_SALE"
            assert sp.amount == self.data.price, "WRONG_AMOUNT"
            sp.emit(sp.record(price=self.data.price, buyer=sp.sender), tag="edition_sold")

            token_id = self.reserve_ids(1)
            self.mint_token(sp.record(token_id=token_id, to_=sp.sender))

        #
        # Owner settings
        #
        @sp.entrypoint
        def set_price(self, price):
            """Zero takes the edition off sale."""
            sp.cast(price, sp.mutez)
            assert sp.sender == self.data.owner, "ONLY_OWNER"
            self.data.price = price
            sp.emit(price, tag="price_changed")

        @sp.entrypoint
        def set_approved_minters(self, minters):
            sp.cast(minters, sp.list[t_minter])
            assert sp.sender == self.data.owner, "ONLY_OWNER"
            for item in minters:
                assert item.amount <= 65535, "PARAM_ERROR"
                if item.amount == 0:
                    del self.data.allowed_minters[item.minter]
                else:
                    self.data.allowed_minters[item.minter] = item.amount

        @sp.entrypoint
        def update_edition_url(self, content_url):
            sp.cast(content_url, sp.bytes)
            assert sp.sender == self.data.owner, "ONLY_OWNER"
            self.data.content_url = content_url

        #
        # Views
        #
        @sp.onchain_view
        def number_can_mint(self):
            """Tokens left to mint, none if the edition is unbounded."""
            if self.data.size == 0:
                return sp.cast(None, sp.option[sp.nat])
            else:
                return sp.Some(sp.as_nat(self.data.size + 1 - self.data.next_id))

        @sp.onchain_view
        def total_supply(self) -> sp.nat:
            """Tokens minted so far, burned ones included."""
            return sp.as_nat(self.data.next_id - 1)

        @sp.onchain_view
        def circulating_supply(self) -> sp.nat:
            return sp.as_nat(self.data.next_id - 1 - sp.to_int(self.data.burned))

        @sp.onchain_view
        def get_uri(self):
            return sp.cast(sp.record(
                content_url=self.data.content_url,
                content_hash=self.data.content_hash,
                thumbnail_url=self.data.thumbnail_url), t_uri)

        @sp.onchain_view
        def is_allowed_minter(self, account):
            sp.cast(account, sp.address)
            null = sp.address("tz1Ke2h7sDdakHJQh8WX4Z372du1KChsksyU")
            return (account == self.data.owner) or (self.data.allowed_minters.get(null, default=0) > 0) or (self.data.allowed_minters.get(account, default=0) > 0)

        @sp.onchain_view
        def get_price(self) -> sp.mutez:
            return self.data.price

        @sp.onchain_view
        def get_size(self) -> sp.nat:
            return self.data.size

        @sp.offchain_view
        def token_metadata(self, token_id):
            """TZIP-12 token metadata. Every token carries the edition's info."""
            sp.cast(token_id, sp.nat)
            assert token_id in self.data.ledger, "FA2_TOKEN_UNDEFINED"
            token_info = sp.cast({
                "name": self.data.name,
                "symbol": self.data.symbol,
                "description": self.data.description,
                "artifactUri": self.data.content_url,
                "displayUri": self.data.content_url,
                "thumbnailUri": self.data.thumbnail_url,
                "contentHash": self.data.content_hash,
                "mimeType": self.data.content_type,
                "decimals": sp.bytes("0x30")
            }, sp.map[sp.string, sp.bytes])
            return sp.cast(sp.record(token_id=token_id, token_info=token_info), t_token_metadata)
