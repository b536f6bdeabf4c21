import os, json, logging
from binascii import hexlify, unhexlify
from .errors import (UnknownGroupError, MalformedMaterial,
                     InvalidPublicValue, UnknownUser, OnlyCallKeyExchangeOnce,
                     OnlyCallKeyOnce, KeyExchangeNotCalled, SerializedTooEarly,
                     WrongParamsError, CredentialError)
from .groups import Group, Groups, RFCGroups, DefaultGroup
from .lookup import UserInfo
from .params import DefaultParams
from .util import (pad, random_bytes, hash_chunks, minimal_bytes,
                   bytes_to_number)
from .verifier import Verifier, make_inner, make_x

logger = logging.getLogger(__name__)

# Client                                  Server
#
#  username                  ->
#                                          (salt, v, group) = lookup(username)
#                                          b = random()
#                                          B = k*v + G^b
#                            <-  salt, B, group
#  a = random()
#  A = G^a
#  u = H(PAD(A) || PAD(B))
#  x = H(salt || H(username || ":" || password))
#  S = (B - k*G^x) ^ (a + u*x)
#                    A       ->
#                                          u = H(PAD(A) || PAD(B))
#                                          S = (A * v^u) ^ b
#
# k = H(N || PAD(G)), everything mod N. Both sides end up with S = G^(b*(a+u*x)).
# A, B and S travel (and are returned) PADded to the group length.

def to_wire(i, group):
    return pad(minimal_bytes(i), group.length)

def make_k(group, params=DefaultParams):
    return bytes_to_number(hash_chunks(params.hash_f, minimal_bytes(group.N),
                                       to_wire(group.G, group)))

def make_u(A, B, group, params=DefaultParams):
    return bytes_to_number(hash_chunks(params.hash_f, pad(A, group.length),
                                       pad(B, group.length)))

class ServerMaterial:
    "What the server sends the client: the user's salt, B, and the group."
    def __init__(self, salt, B, group):
        self.salt = salt
        self.B = B
        self.group = group

    def __repr__(self):
        return "<ServerMaterial %r salt=%s>" % (
            self.group, hexlify(self.salt).decode("ascii"))


class Client:
    """One client side of one SRP exchange.

    The password is hashed down to H(username:password) right away and not
    kept. key_exchange() may be called once; build a new Client for every
    login attempt.
    """

    def __init__(self, username, password, allowed_groups=None,
                 params=DefaultParams, entropy_f=os.urandom):
        self.params = params
        self.inner = make_inner(username, password, params)
        self.username = username
        if allowed_groups is None:
            allowed_groups = RFCGroups
        assert isinstance(allowed_groups, Groups), repr(allowed_groups)
        self.allowed = allowed_groups
        self.entropy_f = entropy_f

        self.a = None
        self.A = None
        self.material = None
        self._key = None
        self._used = False

    def key_exchange(self, material):
        """Answer the server's material. Returns (key, A); send A back.

        Nothing is stored unless the whole computation succeeds, and the
        instance is spent either way.
        """
        if self._used:
            raise OnlyCallKeyExchangeOnce("key_exchange() can only be called once")
        self._used = True

        group = material.group
        if not self.allowed.contains(group):
            logger.warning("server offered a group we do not accept: %r", group)
            raise UnknownGroupError("Unknown group given by server")
        if not isinstance(material.B, bytes) or len(material.B) != group.length:
            logger.warning("rejecting B of wrong size from server")
            raise MalformedMaterial("srp invalid B size")
        if (not isinstance(material.salt, bytes)
            or len(material.salt) != self.params.salt_size):
            logger.warning("rejecting salt of wrong size from server")
            raise MalformedMaterial("srp invalid salt size")

        B = bytes_to_number(material.B)
        if B % group.N == 0:
            logger.warning("rejecting B == 0 mod N from server")
            raise InvalidPublicValue("Invalid B public element from server")

        N = group.N
        a = bytes_to_number(random_bytes(self.params.rand_size, self.entropy_f))
        A = to_wire(pow(group.G, a, N), group)
        u = make_u(A, material.B, group, self.params)
        x = make_x(self.inner, material.salt, self.params)
        k = make_k(group, self.params)
        # key = (B - (k * g^x)) ^ (a + (u * x)) % N
        base = (B - k * pow(group.G, x, N)) % N
        key = to_wire(pow(base, a + u * x, N), group)

        self.a, self.A, self.material, self._key = a, A, material, key
        logger.debug("client key exchange done with %r", group)
        return key, A

    def key(self):
        return self._key

    def forget(self):
        "Drop the secrets. The instance cannot be used afterwards."
        self.inner = None
        self.a = None
        self._key = None
        self._used = True


class ServerInstance:
    """The server side of one SRP exchange, for one user.

    key_exchange(username) looks the user up and returns the ServerMaterial
    to send; key(A) takes the client's reply and returns the shared key.

    If the username is unknown, key_exchange() raises UnknownUser. Given a
    fake_salt it first goes through the same motions as for a real user
    (against a throwaway verifier in DefaultGroup) so the response time does
    not give the miss away, and attaches the decoy material to the
    exception.
    """

    def __init__(self, lookup, params=DefaultParams, entropy_f=os.urandom):
        self.lookup = lookup
        self.params = params
        self.entropy_f = entropy_f

        self.username = None
        self.info = None
        self.decoy = False
        self.b = None
        self.B = None
        self._key = None
        self._started = False
        self._finished = False
        self._unknown = False

    def _fetch(self, username):
        try:
            info, found = self.lookup.fetch(username)
        except Exception:
            logger.warning("user lookup failed, treating user as unknown",
                           exc_info=True)
            return None, False
        if not found or info is None:
            return None, False
        return info, True

    def _decoy_info(self, fake_salt):
        if not isinstance(fake_salt, bytes) or len(fake_salt) != self.params.salt_size:
            raise CredentialError("salt invalid length")
        fake_hash = random_bytes(self.params.hash_f().digest_size, self.entropy_f)
        return UserInfo(verifier=Verifier(hash=fake_hash, salt=fake_salt),
                        group=DefaultGroup)

    def key_exchange(self, username, fake_salt=None):
        if self._started:
            raise OnlyCallKeyExchangeOnce("key_exchange() can only be called once")
        self._started = True

        info, found = self._fetch(username)
        if not found:
            if fake_salt is None:
                logger.info("unknown username, not disguised")
                self._unknown = True
                raise UnknownUser()
            info = self._decoy_info(fake_salt)

        group = info.group
        N = group.N
        b = bytes_to_number(random_bytes(self.params.rand_size, self.entropy_f))
        k = make_k(group, self.params)
        v = bytes_to_number(info.verifier.hash)
        B = to_wire((k * v + pow(group.G, b, N)) % N, group)

        self.username, self.info, self.decoy = username, info, not found
        self.b, self.B = b, B
        material = ServerMaterial(salt=info.verifier.salt, B=B, group=group)
        if self.decoy:
            logger.info("unknown username, sending decoy material")
            raise UnknownUser(material=material)
        logger.debug("server material issued with %r", group)
        return material

    def key(self, A):
        """Return the shared key given the client's A.

        Raises MalformedMaterial or InvalidPublicValue if A is wrong or
        suspicious. Any failure spends the instance.
        """
        if self.info is None:
            if self._unknown:
                raise UnknownUser()
            raise KeyExchangeNotCalled("call .key_exchange() before .key()")
        if self._finished:
            raise OnlyCallKeyOnce("key() can only be called once")
        self._finished = True

        group = self.info.group
        if not isinstance(A, bytes) or len(A) != group.length:
            logger.warning("rejecting A of wrong size from client")
            raise MalformedMaterial("Material A wrong length")
        A_int = bytes_to_number(A)
        if A_int % group.N == 0:
            logger.warning("rejecting A == 0 mod N from client")
            raise InvalidPublicValue("Material A suspicious")

        N = group.N
        u = make_u(A, self.B, group, self.params)
        v = bytes_to_number(self.info.verifier.hash)
        # key = (A * v^u) ^ b % N
        key = to_wire(pow(A_int * pow(v, u, N) % N, self.b, N), group)
        if self.decoy:
            raise UnknownUser()
        self._key = key
        logger.debug("server key computed with %r", group)
        return key

    def forget(self):
        "Drop the secrets. The instance cannot be used afterwards."
        self.b = None
        self._key = None
        self._started = True
        self._finished = True

    # The two halves of the exchange often happen in different requests.
    # serialize() captures what key() will need, including the secret b, so
    # the result must be stored as carefully as a password.

    def serialize(self):
        if self.info is None:
            raise SerializedTooEarly("call .key_exchange() before .serialize()")
        group = self.info.group
        d = {"params": self.params.fingerprint(),
             "group": {"N": "%x" % group.N, "G": group.G, "name": group.name},
             "verifier": self.info.verifier.to_dict(),
             "decoy": self.decoy,
             "b": hexlify(pad(minimal_bytes(self.b),
                                self.params.rand_size)).decode("ascii"),
             "B": hexlify(self.B).decode("ascii"),
             }
        if isinstance(self.username, bytes):
            d["username"] = {"bytes": hexlify(self.username).decode("ascii")}
        else:
            d["username"] = self.username
        return json.dumps(d).encode("ascii")

    @classmethod
    def from_serialized(klass, data, params=DefaultParams):
        d = json.loads(data.decode("ascii"))
        if d["params"] != params.fingerprint():
            err = ("ServerInstance.from_serialized() must be called with the"
                   " same params= that were used to create the serialized"
                   " data. These are different somehow.")
            raise WrongParamsError(err)
        def _should_be_unused(count): raise NotImplementedError
        self = klass(lookup=None, params=params, entropy_f=_should_be_unused)
        g = d["group"]
        group = Group(N=int(g["N"], 16), G=g["G"], name=g["name"])
        self.info = UserInfo(verifier=Verifier.from_dict(d["verifier"]),
                             group=group)
        username = d.get("username")
        if isinstance(username, dict):
            username = unhexlify(username["bytes"].encode("ascii"))
        self.username = username
        self.decoy = d["decoy"]
        self.b = bytes_to_number(unhexlify(d["b"].encode("ascii")))
        self.B = unhexlify(d["B"].encode("ascii"))
        self._started = True
        return self
