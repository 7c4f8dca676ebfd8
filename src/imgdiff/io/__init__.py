# -*- coding: utf-8 -*-
"""Image decoding, reports and histogram rendering."""
