"""SSM Instance Finder - Root Package.

This package resolves a human-supplied identifier (instance ID, IP address,
DNS name or Name tag) into the compute instances reachable through AWS Systems
Manager, by composing the EC2 and SSM inventory APIs.

Key Components:
    - domain: Instance value objects, identifier classification and ports
    - application: The instance finder service (find_all / find_by_identifier)
    - infrastructure: AWS client management and infrastructure errors
    - providers: AWS adapters for the EC2 and SSM inventories
    - config: Configuration defaults, loading and typed schemas
    - cli: Command-line entry point and output formatting

Usage:
    The finder is typically used through the command-line interface:

    $ instance-finder list
    $ instance-finder find 10.0.1.15 --format table
"""

__version__ = "0.1.0"
__author__ = "AWS Professional Services"
