"""
service_decommissioner

This package removes a service and every reference to it across the stores
that know about it.

We keep modules small and well separated:
core contains shared data structures, errors, config and logging setup
interaction contains the operator prompt provider
execution contains the service manager capability and its test double
stores contains one adapter per backing store
discovery contains project location and inventory building
workflow contains the confirmation gate, remover, reporter and engine
"""

__version__ = "0.1.0"
