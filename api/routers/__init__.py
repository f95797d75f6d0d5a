"""Folio API routers."""
