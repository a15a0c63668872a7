"""
Engine Client - container engine addressing layer

Validated value objects for the network data a container engine reports
(IP addresses, CIDR blocks, MAC addresses, published ports) and for the URI
that addresses the engine's control endpoint.
"""

__version__ = "0.1.0"
