"""aclgraph - role and permission resolution with an implication graph."""

__version__ = "0.1.0"
