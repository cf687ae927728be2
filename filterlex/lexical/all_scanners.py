from .words import parse_unsigned, parse_operator, parse_identifier_like
from .addresses import parse_ethernet_addr, parse_ipv4
from .strings import parse_string


SCANNERS = {
	'unsigned': parse_unsigned,
	'operator': parse_operator,
	'identifier': parse_identifier_like,
	'ethernet': parse_ethernet_addr,
	'ipv4': parse_ipv4,
	'string': parse_string,
}
