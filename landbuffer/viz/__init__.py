# -*- coding: utf-8 -*-
"""The viz package renders land-cover maps and composition charts with matplotlib and seaborn."""
