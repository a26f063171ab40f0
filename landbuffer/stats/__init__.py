# -*- coding: utf-8 -*-
"""Statistics on land-cover layers: class distributions and the composition of each buffer."""
