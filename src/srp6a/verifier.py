import os, hashlib
from binascii import hexlify, unhexlify
from hkdf import Hkdf
from .errors import CredentialError
from .params import DefaultParams
from .util import random_bytes, hash_chunks, number_to_bytes, bytes_to_number

# x = H(salt || H(username || ":" || password))
# v = G^x mod N
#
# The inner hash is all a client needs to keep between construction and
# key_exchange(); x only lives long enough to compute v (or the key).

class Verifier:
    def __init__(self, hash, salt):
        assert isinstance(hash, bytes), repr(hash)
        assert isinstance(salt, bytes), repr(salt)
        self.hash = hash
        self.salt = salt

    def __eq__(self, other):
        if not isinstance(other, Verifier):
            return NotImplemented
        return self.hash == other.hash and self.salt == other.salt

    def __ne__(self, other):
        eq = self.__eq__(other)
        if eq is NotImplemented:
            return eq
        return not eq

    def __repr__(self):
        return "<Verifier salt=%s>" % hexlify(self.salt).decode("ascii")

    def to_dict(self):
        return {"hash": hexlify(self.hash).decode("ascii"),
                "salt": hexlify(self.salt).decode("ascii")}

    @classmethod
    def from_dict(klass, d):
        return klass(hash=unhexlify(d["hash"].encode("ascii")),
                     salt=unhexlify(d["salt"].encode("ascii")))

def to_utf8(value, what):
    if isinstance(value, bytes):
        try:
            value.decode("utf-8")
        except UnicodeDecodeError:
            raise CredentialError("%s is not valid utf8" % what)
        return value
    if not isinstance(value, str):
        raise CredentialError("%s must be text, not %s"
                              % (what, type(value).__name__))
    try:
        return value.encode("utf-8")
    except UnicodeEncodeError:
        raise CredentialError("%s is not valid utf8" % what)

def make_inner(username, password, params=DefaultParams):
    """Return H(username || ':' || password) after checking both halves.

    Either may be str or UTF-8 bytes. Each must be non-empty and at most
    params.max_credential_size bytes once encoded.
    """
    user = to_utf8(username, "username")
    pw = to_utf8(password, "password")
    if not 0 < len(user) <= params.max_credential_size:
        raise CredentialError("username invalid length")
    if not 0 < len(pw) <= params.max_credential_size:
        raise CredentialError("password invalid length")
    return hash_chunks(params.hash_f, user + b":" + pw)

def make_x(inner, salt, params=DefaultParams):
    if not isinstance(salt, bytes) or len(salt) != params.salt_size:
        raise CredentialError("salt invalid length")
    return bytes_to_number(hash_chunks(params.hash_f, salt, inner))

def create_verifier(username, password, group, salt=None,
                    params=DefaultParams, entropy_f=os.urandom):
    """Derive the Verifier a credential store keeps for this user.

    The password is not needed afterwards. 'salt' is normally left out and
    drawn from entropy_f; passing one in is for migrations and tests.
    """
    inner = make_inner(username, password, params)
    if salt is None:
        salt = random_bytes(params.salt_size, entropy_f)
    x = make_x(inner, salt, params)
    v = pow(group.G, x, group.N)
    return Verifier(hash=number_to_bytes(v, group.N), salt=salt)

def make_fake_salt(secret, username, params=DefaultParams):
    """Salt to hand out for an unknown username.

    A fresh random salt on every probe would tell an attacker the name is
    unknown (real salts never change), so the decoy is derived from a
    server-wide secret and the username instead: stable per name, and
    unlinkable to anything without the secret.
    """
    assert isinstance(secret, bytes), repr(secret)
    user = to_utf8(username, "username")
    h = Hkdf(salt=b"", input_key_material=secret, hash=hashlib.sha256)
    return h.expand(b"SRP fake salt:" + user, params.salt_size)
