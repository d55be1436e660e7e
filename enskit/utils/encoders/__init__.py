from enskit.utils.encoders.encode_abi import (
  CONTENT_TYPES,
  SUPPORTED_CONTENT_TYPES,
  EncodedAbi,
  encode_abi,
)
from enskit.utils.encoders.encode_records import (
  ETH_COIN_TYPE,
  encode_clear_records,
  encode_multicall,
  encode_set_addr,
  encode_set_content_hash,
  encode_set_text,
)
from enskit.utils.encoders.encode_set_abi import encode_set_abi
