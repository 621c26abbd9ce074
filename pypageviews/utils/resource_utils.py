import json

from google.oauth2 import service_account  # pip install --upgrade google-auth
from google.analytics.data_v1beta import BetaAnalyticsDataAsyncClient  # pip install google-analytics-data

from .. import ppv_logger

_analytics_readonly_scopes = [
    'https://www.googleapis.com/auth/analytics.readonly'
]


def read_key_file(path: str) -> str:
    with open(path, 'rb') as _file:
        return _file.read().decode('utf8')


def load_secrets(credential_ref: str | bytes | dict) -> dict:
    """
    Resolve a credential reference to the parsed service account key.
    @param credential_ref: a path to a JSON key file, the key itself as a JSON string or bytes, or the parsed dict
    """
    if isinstance(credential_ref, dict):
        return credential_ref

    if isinstance(credential_ref, bytes):
        credential_ref = credential_ref.decode('utf8')

    if not isinstance(credential_ref, str):
        raise TypeError("credential_ref must be a key file path, a json str or bytes, or a dict")

    if credential_ref.lstrip().startswith('{'):
        return json.loads(credential_ref)

    return json.loads(read_key_file(credential_ref))


def get_analytics_credentials(credential_ref: str | bytes | dict) -> service_account.Credentials:
    secrets = load_secrets(credential_ref)
    return service_account.Credentials.from_service_account_info(
        info=secrets
    ).with_scopes(
        scopes=_analytics_readonly_scopes
    )


def build_ga4_client(credential_ref: str | bytes | dict) -> BetaAnalyticsDataAsyncClient:
    project_credentials = get_analytics_credentials(credential_ref)
    ppv_logger.debug(f"build_ga4_client() :: building GA4 data client for "
                     f"{getattr(project_credentials, 'service_account_email', 'service account')}")
    return BetaAnalyticsDataAsyncClient(credentials=project_credentials)
