"""
Cross-cutting pieces used by the accounts, weddings and guestbook apps:
access tokens and the access gateway, the DAL error decorator, the
exception hierarchy with its DRF handler, object storage for gallery
photos, and the service container.

Import from submodules directly; this package re-exports nothing.
"""
