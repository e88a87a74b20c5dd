"""Protocol constants shared by the plugin and the orchestrator."""

# Environment variables holding TLS file paths
SERVER_CERT_ENV = "GAIA_PLUGIN_CERT"
SERVER_KEY_ENV = "GAIA_PLUGIN_KEY"
ROOT_CA_CERT_ENV = "GAIA_PLUGIN_CA_CERT"

# Handshake defaults
LISTEN_ADDRESS = "localhost"
CORE_PROTOCOL_VERSION = 1
PROTOCOL_VERSION = 2
NETWORK_TYPE = "tcp"
PROTOCOL_TYPE = "http"
PROTOCOL_TYPE_TLS = "https"

# Fixed messages
EXIT_PIPELINE_MESSAGE = "pipeline exit requested by job"
JOB_NOT_FOUND_MESSAGE = "job not found in plugin"

JOB_STREAM_MEDIA_TYPE = "application/x-ndjson"
