DEFAULT_URI_BASE = "https://api.replicate.com/v1"
DEFAULT_REQUEST_TIMEOUT_SEC = 120

ACCESS_TOKEN_ENV_VAR = "REPLICATE_API_TOKEN"
URI_BASE_ENV_VAR = "REPLICATE_URI_BASE"
WEBHOOK_URL_ENV_VAR = "REPLICATE_WEBHOOK_URL"

MODELS_PATH = "/models"
VERSIONS_PATH = "/versions"
PREDICTIONS_PATH = "/predictions"
TRAININGS_PATH = "/trainings"
DEPLOYMENTS_PATH = "/deployments"
HARDWARE_PATH = "/hardware"
CANCEL_PATH = "/cancel"

CURSOR_KEY = "cursor"
DESCRIPTION_KEY = "description"
DESTINATION_KEY = "destination"
GITHUB_URL_KEY = "github_url"
HARDWARE_KEY = "hardware"
INPUT_KEY = "input"
LICENSE_URL_KEY = "license_url"
MAX_INSTANCES_KEY = "max_instances"
MIN_INSTANCES_KEY = "min_instances"
MODEL_KEY = "model"
NAME_KEY = "name"
OWNER_KEY = "owner"
PAPER_URL_KEY = "paper_url"
COVER_IMAGE_URL_KEY = "cover_image_url"
VERSION_KEY = "version"
VISIBILITY_KEY = "visibility"
WEBHOOK_KEY = "webhook"
WEBHOOK_EVENTS_FILTER_KEY = "webhook_events_filter"
