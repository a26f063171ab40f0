# -*- coding: utf-8 -*-
"""Helpers for staging sample data."""
