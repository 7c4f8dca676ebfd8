# -*- coding: utf-8 -*-
"""Diff engine: color metric, geometry, histogram and verdict."""
