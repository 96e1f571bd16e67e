"""
Movie Character API
===================

REST API for managing franchises, movies and characters.
"""
