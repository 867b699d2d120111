"""
Artboard Toolkit - Services

Operations on documents: geometry, grouping, movement, selection,
duplication, palette matching and conversion.
"""
