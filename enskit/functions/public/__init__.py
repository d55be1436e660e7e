from enskit.functions.public.get_abi_record import DecodedAbi, get_abi_record
from enskit.functions.public.get_address_record import get_address_record
from enskit.functions.public.get_available import get_available
from enskit.functions.public.get_content_hash_record import get_content_hash_record
from enskit.functions.public.get_name import NameResult, get_name
from enskit.functions.public.get_owner import OwnerResult, get_owner
from enskit.functions.public.get_price import Price, get_price
from enskit.functions.public.get_resolver import get_resolver
from enskit.functions.public.get_text_record import get_text_record
from enskit.functions.public.get_wrapper_data import WrapperData, get_wrapper_data
