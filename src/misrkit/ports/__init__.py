# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Port interfaces for external collaborators.

Adapters implement these to reach orbit catalogs.
"""
from misrkit.ports.orbit_catalog import OrbitCatalog

__all__ = ["OrbitCatalog"]
