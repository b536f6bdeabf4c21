from .util import size_bytes

"""Safe-prime groups for SRP.

A Group is the pair (N, G): a large safe prime N (N = 2q+1 with q prime) and
a generator G of the multiplicative group modulo N. All of the SRP
arithmetic happens modulo N. Both sides of an exchange must agree on the
group, and the client refuses any group it has not been told to trust, so
a server cannot talk it down to a weak modulus.

Groups are immutable and compared by value, so a Group read back from a
credential store is equal to the constant it was created from:

    g = Group4096
    len(g)              # byte length of N, the width of every PAD()
    g == Group(N=g.N, G=g.G)
    g in RFCGroups
    RFCGroups.contains(g)

An empty Groups() stands for "the built-in RFC 5054 groups".
"""


class Group:
    def __init__(self, N, G, name=None):
        if not isinstance(N, int) or not isinstance(G, int):
            raise TypeError("Group(N, G) wants integers")
        if not 0 < G < N:
            raise ValueError("generator must satisfy 0 < G < N")
        self._N = N
        self._G = G
        self._name = name
        self._length = size_bytes(N)

    # read-only: every exchange using this group shares it
    @property
    def N(self):
        return self._N

    @property
    def G(self):
        return self._G

    @property
    def name(self):
        return self._name

    @property
    def length(self):
        return self._length

    def __len__(self):
        return self.length

    def __eq__(self, other):
        if not isinstance(other, Group):
            return NotImplemented
        return self._N == other._N and self._G == other._G

    def __ne__(self, other):
        eq = self.__eq__(other)
        if eq is NotImplemented:
            return eq
        return not eq

    def __hash__(self):
        return hash((self._N, self._G))

    def __repr__(self):
        if self.name:
            return "<Group %s>" % self.name
        return "<Group %d-bit G=%d>" % (self._N.bit_length(), self._G)


class Groups:
    """An ordered set of acceptable groups."""

    def __init__(self, groups=()):
        self._groups = tuple(groups)
        for g in self._groups:
            if not isinstance(g, Group):
                raise TypeError("Groups() wants Group instances, not %r" % (g,))

    def contains(self, group):
        if not self._groups:
            return RFCGroups.contains(group)
        for g in self._groups:
            if g == group:
                return True
        return False

    __contains__ = contains

    def __iter__(self):
        return iter(self._groups or RFCGroups._groups)

    def __repr__(self):
        return "Groups(%r)" % (list(self._groups),)


# These come from RFC 5054 Appendix A. The 3072- and 4096-bit moduli are the
# RFC 3526 MODP primes, with generator 5.

Group2048 = Group(
    N=0xAC6BDB41324A9A9BF166DE5E1389582FAF72B6651987EE07FC3192943DB56050A37329CBB4A099ED8193E0757767A13DD52312AB4B03310DCD7F48A9DA04FD50E8083969EDB767B0CF6095179A163AB3661A05FBD5FAAAE82918A9962F0B93B855F97993EC975EEAA80D740ADBF4FF747359D041D5C33EA71D281E446B14773BCA97B43A23FB801676BD207A436C6481F1D2B9078717461A5B9D32E688F87748544523B524B0D57D5EA77A2775D2ECFA032CFBDBF52FB3786160279004E57AE6AF874E7303CE53299CCC041C7BC308D82A5698F3A8D0C38271AE35F8E9DBFBB694B5C803D89F7AE435DE236D525F54759B65E372FCD68EF20FA7111F9E4AFF73,
    G=2,
    name="rfc5054-2048",
    )

Group3072 = Group(
    N=0xFFFFFFFFFFFFFFFFC90FDAA22168C234C4C6628B80DC1CD129024E088A67CC74020BBEA63B139B22514A08798E3404DDEF9519B3CD3A431B302B0A6DF25F14374FE1356D6D51C245E485B576625E7EC6F44C42E9A637ED6B0BFF5CB6F406B7EDEE386BFB5A899FA5AE9F24117C4B1FE649286651ECE45B3DC2007CB8A163BF0598DA48361C55D39A69163FA8FD24CF5F83655D23DCA3AD961C62F356208552BB9ED529077096966D670C354E4ABC9804F1746C08CA18217C32905E462E36CE3BE39E772C180E86039B2783A2EC07A28FB5C55DF06F4C52C9DE2BCBF6955817183995497CEA956AE515D2261898FA051015728E5A8AAAC42DAD33170D04507A33A85521ABDF1CBA64ECFB850458DBEF0A8AEA71575D060C7DB3970F85A6E1E4C7ABF5AE8CDB0933D71E8C94E04A25619DCEE3D2261AD2EE6BF12FFA06D98A0864D87602733EC86A64521F2B18177B200CBBE117577A615D6C770988C0BAD946E208E24FA074E5AB3143DB5BFCE0FD108E4B82D120A93AD2CAFFFFFFFFFFFFFFFF,
    G=5,
    name="rfc5054-3072",
    )

Group4096 = Group(
    N=0xFFFFFFFFFFFFFFFFC90FDAA22168C234C4C6628B80DC1CD129024E088A67CC74020BBEA63B139B22514A08798E3404DDEF9519B3CD3A431B302B0A6DF25F14374FE1356D6D51C245E485B576625E7EC6F44C42E9A637ED6B0BFF5CB6F406B7EDEE386BFB5A899FA5AE9F24117C4B1FE649286651ECE45B3DC2007CB8A163BF0598DA48361C55D39A69163FA8FD24CF5F83655D23DCA3AD961C62F356208552BB9ED529077096966D670C354E4ABC9804F1746C08CA18217C32905E462E36CE3BE39E772C180E86039B2783A2EC07A28FB5C55DF06F4C52C9DE2BCBF6955817183995497CEA956AE515D2261898FA051015728E5A8AAAC42DAD33170D04507A33A85521ABDF1CBA64ECFB850458DBEF0A8AEA71575D060C7DB3970F85A6E1E4C7ABF5AE8CDB0933D71E8C94E04A25619DCEE3D2261AD2EE6BF12FFA06D98A0864D87602733EC86A64521F2B18177B200CBBE117577A615D6C770988C0BAD946E208E24FA074E5AB3143DB5BFCE0FD108E4B82D120A92108011A723C12A787E6D788719A10BDBA5B2699C327186AF4E23C1A946834B6150BDA2583E9CA2AD44CE8DBBBC2DB04DE8EF92E8EFC141FBECAA6287C59474E6BC05D99B2964FA090C3A2233BA186515BE7ED1F612970CEE2D7AFB81BDD762170481CD0069127D5B05AA993B4EA988D8FDDC186FFB7DC90A6C08F4DF435C934063199FFFFFFFFFFFFFFFF,
    G=5,
    name="rfc5054-4096",
    )

RFCGroups = Groups([Group2048, Group3072, Group4096])

# used for the decoy record when a username is unknown
DefaultGroup = Group4096

def get_group(name):
    for g in RFCGroups:
        if g.name == name:
            return g
    raise KeyError("no registered group named %r" % (name,))
