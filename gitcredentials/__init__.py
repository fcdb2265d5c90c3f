"""gitcredentials: a Cloud Native Buildpack that provisions git credentials.

Credentials from buildpack.yml and ``GIT_CREDENTIALS_*`` environment
variables are written into git's global configuration and in-memory
credential cache, so later build steps can fetch private repositories over
HTTPS without secrets ending up in image layers.
"""

__version__ = "1.0.0"
