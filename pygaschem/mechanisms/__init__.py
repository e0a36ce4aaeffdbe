"""Prebuilt chemical mechanisms.

- :mod:`pygaschem.mechanisms.fullchem`: GEOS-Chem full chemistry
- :mod:`pygaschem.mechanisms.superfast`: Super-Fast background ozone chemistry
"""
