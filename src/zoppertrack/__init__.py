"""ZopperTrack attendance package.

Organized by feature modules (attendance, holidays, visits, export, ...)
with a thin Flask controller layer over service/repository layers. The
repositories talk to the ZopperTrack REST API instead of a database.
"""
