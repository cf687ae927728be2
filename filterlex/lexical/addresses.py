"""
Ethernet (MAC) and IPv4 addresses.

The Ethernet grammar is looser than any single convention: separators between
pairs of octets may be any of `:`, `.`, or `-`, chosen independently at each
position, and the separator inside a pair is optional. So all of these work:
	12:34:56:78:90:ab    12-34-56-78-90-ab    1234.5678.90ab    12.34:56.78-90ab
Existing filters rely on that looseness.
"""
from ..scanning.cursor import as_view
from ..scanning.primitives import hex_byte, dec_byte, one_of, optional, tag, sequence, mapped
from .tokens import EthernetAddress, IPv4Address

_separator = one_of(':.-', 'separator (":", "." or "-")')

_byte_pair = mapped(sequence(hex_byte, optional(_separator), hex_byte), lambda v: (v[0], v[2]))

_ethernet = mapped(
	sequence(_byte_pair, _separator, _byte_pair, _separator, _byte_pair),
	lambda v: EthernetAddress(v[0] + v[2] + v[4]),
)

def parse_ethernet_addr(subject):
	return _ethernet(as_view(subject))


_dot = tag('.')

_ipv4 = mapped(
	sequence(dec_byte, _dot, dec_byte, _dot, dec_byte, _dot, dec_byte),
	lambda v: IPv4Address(v[::2]),
)

def parse_ipv4(subject):
	""" Four decimal octets separated by dots. An octet past 255 fails right there; it does not wrap. """
	return _ipv4(as_view(subject))
