RELAY_ERROR_HEADER = "X-Relay-Error"

DEFAULT_TARGET_URL = "https://conway1.linera.blockhunters.services"
DEFAULT_ROUTE_PATH = "/api/proxy"

DEFAULT_ALLOWED_HOSTS = (
    "localhost",
    "127.0.0.1",
    "conway1.linera.blockhunters.services",
    "faucet.testnet-conway.linera.net",
    "api.testnet-conway.linera.net",
)

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}
