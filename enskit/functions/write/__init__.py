from enskit.functions.write.commit_name import commit_name
from enskit.functions.write.create_subname import create_subname
from enskit.functions.write.delete_subname import delete_subname
from enskit.functions.write.register_name import register_name, renew_name
from enskit.functions.write.set_abi_record import set_abi_record
from enskit.functions.write.set_address_record import set_address_record
from enskit.functions.write.set_records import set_records
from enskit.functions.write.set_resolver import set_resolver
from enskit.functions.write.set_text_record import set_text_record
