import smartpy as sp


#
# Python side helpers for building parameters and storage values.
# Contract code can't call these, they run before compilation.
#

# Tezos address with an all-zero key hash. Plays the role of the
# zero address: null owner, mint source, burn destination, public minting key.
NULL_ADDRESS = "tz1Ke2h7sDdakHJQh8WX4Z372du1KChsksyU"

def null_address():
    return sp.address(NULL_ADDRESS)

def bytes_of_string(s: str):
    """Returns `s` utf-8 encoded as a bytes literal."""
    return sp.bytes("0x" + s.encode("utf-8").hex())

def metadata_of_url(url: str):
    """TZIP-16 metadata big_map pointing at `url`."""
    return sp.big_map({"": bytes_of_string(url)})

def share(holder, bps):
    return sp.record(holder=holder, bps=sp.nat(bps))

def minter(address, amount):
    return sp.record(minter=address, amount=sp.nat(amount))

def edition_params(owner, name="", symbol="", description="", content_url="",
    content_hash="0x", content_type="", thumbnail_url="", size=0, royalties=0, shares=None):
    """Parameters for `initialize` and `create_edition`.

    Defaults match an edition created with only the info block set:
    unbounded, no royalties, owner holding all shares."""
    if shares is None:
        shares = []
    return sp.record(
        owner=owner,
        name=bytes_of_string(name),
        symbol=bytes_of_string(symbol),
        description=bytes_of_string(description),
        content_url=bytes_of_string(content_url),
        content_hash=sp.bytes(content_hash),
        content_type=bytes_of_string(content_type),
        thumbnail_url=bytes_of_string(thumbnail_url),
        size=sp.nat(size),
        royalties=sp.nat(royalties),
        shares=shares)
