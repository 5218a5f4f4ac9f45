"""
Names and data values of the Spring Cloud Data Flow ytt package that the harness validates.
"""

SCDF_SERVER_NAME = "scdf-server"
SKIPPER_NAME = "skipper"
BINDER_RABBIT_NAME = "rabbitmq"
REGISTRY_SECRET_NAME = "reg-creds"

REQUIRED_DATA_VALUES = (
    "scdf.server.image.tag",
    "scdf.skipper.image.tag",
    "scdf.ctr.image.tag",
)
""" Data values that must be set (or replaced by the matching `image.digest`) for the package to render. """

DEFAULT_REQUIRED_DATA_VALUES = (
    "scdf.server.image.tag=2.8.1",
    "scdf.skipper.image.tag=2.7.1",
    "scdf.ctr.image.tag=2.8.1",
)
