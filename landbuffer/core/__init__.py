# -*- coding: utf-8 -*-
"""The core package holds the building blocks of the buffer workflow.

It defines layers, the land-cover category legend, the site point, circular buffers and category reclassification.
"""
