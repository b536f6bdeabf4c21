
from .srp import Client, ServerInstance, ServerMaterial
from .errors import (SRPError, CredentialError, UnknownGroupError,
                     MalformedMaterial, InvalidPublicValue, UnknownUser)
from .groups import (Group, Groups, Group2048, Group3072, Group4096,
                     RFCGroups, DefaultGroup)
from .lookup import Lookup, MapLookup, UserInfo
from .params import Params, DefaultParams
from .verifier import Verifier, create_verifier, make_fake_salt
_hush_pyflakes = [Client, ServerInstance, ServerMaterial,
                  SRPError, CredentialError, UnknownGroupError,
                  MalformedMaterial, InvalidPublicValue, UnknownUser,
                  Group, Groups, Group2048, Group3072, Group4096,
                  RFCGroups, DefaultGroup, Lookup, MapLookup, UserInfo,
                  Params, DefaultParams, Verifier, create_verifier,
                  make_fake_salt]
del _hush_pyflakes

__version__ = "0.1.0"
