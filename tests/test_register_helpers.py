import pytest
from eth_abi import encode
from web3 import Web3

from enskit.contracts import EMPTY_ADDRESS
from enskit.errors import (
  CampaignReferenceTooLargeError,
  ResolverAddressRequiredError,
  UnsupportedNameTypeError,
)
from enskit.utils.normalise import labelhash
from enskit.utils.register_helpers import (
  COMMITMENT_TYPES,
  RegistrationParameters,
  make_commitment,
  make_commitment_tuple,
  make_registration_tuple,
  random_secret,
)

OWNER = '0x70997970C51812dc3A010C7d01b50e0d17dc79C8'
RESOLVER = '0x8FADE66B79cC9f707aB26799354482EB93a5B7dD'
SECRET = bytes.fromhex('a' * 64)


def _params(**overrides) -> RegistrationParameters:
  values = {
    'name': 'wrapped-with-subnames.eth',
    'owner': OWNER,
    'duration': 31536000,
    'secret': SECRET,
  }
  values.update(overrides)
  return RegistrationParameters(**values)


def test_make_commitment_matches_abi_encoding():
  expected = Web3.keccak(encode(COMMITMENT_TYPES, [
    labelhash('wrapped-with-subnames'), OWNER, 31536000, SECRET, EMPTY_ADDRESS, [], False, 0,
  ]))
  assert make_commitment(_params()) == bytes(expected)


def test_commitment_tuple_includes_record_calls():
  params = _params(
    resolver_address=RESOLVER,
    records={'texts': [{'key': 'description', 'value': 'hello'}]},
  )
  commitment = make_commitment_tuple(params)
  assert commitment[4] == RESOLVER
  assert len(commitment[5]) == 1
  assert commitment[5][0][:4] == bytes(Web3.keccak(text='setText(bytes32,string,string)')[:4])


def test_registration_tuple_uses_label():
  registration = make_registration_tuple(_params(name='Alice.eth'))
  assert registration[0] == 'alice'


@pytest.mark.parametrize('name', ['eth', 'sub.alice.eth', 'alice.com'])
def test_only_eth_2ld(name):
  with pytest.raises(UnsupportedNameTypeError):
    make_commitment(_params(name=name))


def test_records_require_resolver():
  with pytest.raises(ResolverAddressRequiredError):
    make_commitment(_params(records={'texts': [{'key': 'a', 'value': 'b'}]}))


def test_reverse_record_requires_resolver():
  with pytest.raises(ResolverAddressRequiredError):
    make_commitment(_params(reverse_record=True))


def test_random_secret():
  assert len(random_secret()) == 32
  assert random_secret() != random_secret()


def test_random_secret_platform_and_campaign():
  secret = random_secret(platform_domain='example', campaign=258)
  assert secret[:4] == labelhash('example')[:4]
  assert secret[4:8] == b'\x00\x00\x01\x02'
  with pytest.raises(CampaignReferenceTooLargeError):
    random_secret(campaign=0x100000000)
  with pytest.raises(CampaignReferenceTooLargeError):
    random_secret(campaign=-1)
