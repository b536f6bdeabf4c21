import os
from .errors import CredentialError
from .params import DefaultParams
from .verifier import Verifier, create_verifier, to_utf8

class UserInfo:
    "What the server knows about one user: their Verifier and Group."
    def __init__(self, verifier, group):
        assert isinstance(verifier, Verifier), repr(verifier)
        self.verifier = verifier
        self.group = group

class Lookup:
    """Where a ServerInstance finds its users.

    Subclasses implement fetch(username), returning (UserInfo, True) for a
    known user and (None, False) otherwise. It can be backed by anything. If
    it raises, the server logs that and treats the user as unknown.
    """
    def fetch(self, username):
        raise NotImplementedError

class MapLookup(Lookup):
    """An in-memory Lookup, mostly for tests and examples.

    Usernames are keyed by their UTF-8 bytes, so "ender" and b"ender" are
    the same user, just as they are to make_inner().
    """

    def __init__(self, params=DefaultParams, entropy_f=os.urandom):
        self.params = params
        self.entropy_f = entropy_f
        self._users = {}

    def add(self, username, password, group):
        # replaces any earlier entry for this username
        v = create_verifier(username, password, group, params=self.params,
                            entropy_f=self.entropy_f)
        self._users[to_utf8(username, "username")] = UserInfo(verifier=v,
                                                              group=group)

    def fetch(self, username):
        try:
            user = to_utf8(username, "username")
        except CredentialError:
            return None, False
        info = self._users.get(user)
        return info, info is not None

    def __len__(self):
        return len(self._users)
