"""
Epic Games service endpoints and protocol constants.
"""

ACCOUNT_ENDPOINT = "https://account-public-service-prod03.ol.epicgames.com/account/api/"
OAUTH_TOKEN_ENDPOINT = ACCOUNT_ENDPOINT + "oauth/token"
OAUTH_EXCHANGE_ENDPOINT = ACCOUNT_ENDPOINT + "oauth/exchange"
OAUTH_VERIFY_ENDPOINT = ACCOUNT_ENDPOINT + "oauth/verify"
KILL_SESSION_ENDPOINT = ACCOUNT_ENDPOINT + "oauth/sessions/kill"
PUBLIC_ACCOUNT_ENDPOINT = ACCOUNT_ENDPOINT + "public/account/"

FRIENDS_ENDPOINT = "https://friends-public-service-prod06.ol.epicgames.com/friends/api/public/friends/"
FORTNITE_ENDPOINT = "https://fortnite-public-service-prod11.ol.epicgames.com/fortnite/api/"
NEWS_ENDPOINT = "https://fortnitecontent-website-prod07.ol.epicgames.com/content/api/pages/fortnite-game"
STATUS_ENDPOINT = "https://lightswitch-public-service-prod06.ol.epicgames.com/lightswitch/api/service/bulk/status"

# base64("<launcher client id>:<launcher client secret>")
EPIC_LAUNCHER_TOKEN = (
    "MzQ0NmNkNzI2OTRjNGE0NDg1ZDgxYjc3YWRiYjIxNDE6OTIwOWQ0YTVlMjVhNDU3ZmI5YjA3NDg5ZDMxM2I0MWE="
)
DEVICE_ID_HEADER = "X-Epic-Device-ID"
TOKEN_TYPE = "eg1"
KILL_TYPE_OTHERS = "OTHERS_ACCOUNT_CLIENT_SERVICE"

TWO_FACTOR_REQUIRED_CODE = "errors.com.epicgames.common.two_factor_authentication.required"

# Seconds shaved off expires_in so a token is refreshed before the server rejects it.
TOKEN_EXPIRY_MARGIN = 60.0
