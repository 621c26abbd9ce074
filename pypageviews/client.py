import datetime
from typing import Any, Callable, Union

from .page_views import ViewQuery, fetch_page_view_count
from .utils.resource_utils import build_ga4_client
from . import ppv_logger


class PageViewClient:
    """
    The PageViewClient class holds the service account credentials for a project
    which can then be used to create a PageViewFetcher object.

    example implementation:
    from pypageviews.client import PageViewClient
    page_view_client = PageViewClient.build(key_file_path='<path-to-your-key-file>')
    """

    def __init__(self,
                 credential_ref: Union[str, bytes, dict] = None,
                 client_factory: Callable[[Any], Any] = None
                 ):

        self.credential_ref = credential_ref
        self.client_factory = client_factory or build_ga4_client

    @classmethod
    def build(cls, api_key: str | bytes | dict = None, key_file_path: str = None):
        if api_key:
            ppv_logger.info(f"initialised PageViewClient object from api key")
            return cls(credential_ref=api_key)
        elif key_file_path:
            ppv_logger.info(f"initialised PageViewClient object from key file")
            return cls(credential_ref=key_file_path)
        else:
            raise KeyError("either api_key or key_file_path must be supplied")

    def fetcher(self, property_id: str) -> 'PageViewFetcher':
        """
        @param property_id: the GA4 property id, shown under "Property details" in the GA4 admin panel
        @returns: PageViewFetcher object.
        """
        return PageViewFetcher(
            credential_ref=self.credential_ref,
            property_id=property_id,
            client_factory=self.client_factory
        )

    def __bool__(self):
        return self.credential_ref is not None

    def __repr__(self):
        if isinstance(self.credential_ref, str) and not self.credential_ref.lstrip().startswith('{'):
            _source = f"key file {self.credential_ref}"
        elif self.credential_ref is None:
            _source = "no credentials"
        else:
            _source = "api key"
        return f"PyPageViews Client object: {_source}"


class PageViewFetcher:
    """
    The PageViewFetcher runs page view lookups against a single GA4 property.
    A new GA4 data client is built for each lookup, so a fetcher can be shared between concurrent tasks.
    """
    def __init__(self,
                 credential_ref: Union[str, bytes, dict],
                 property_id: str,
                 client_factory: Callable[[Any], Any] = None):

        self.credential_ref = credential_ref
        self.property_id: str = property_id
        self.client_factory = client_factory or build_ga4_client

        ppv_logger.debug(f"initialising PageViewFetcher object")

    def query(self,
              slug: str,
              start_date: Union[str, datetime.date],
              end_date: Union[str, datetime.date] = 'today') -> ViewQuery:
        return ViewQuery(
            slug=slug,
            property_id=self.property_id,
            credential_ref=self.credential_ref,
            start_date=start_date,
            end_date=end_date
        )

    async def page_views(self,
                         slug: str,
                         start_date: Union[str, datetime.date],
                         end_date: Union[str, datetime.date] = 'today') -> int:
        return await fetch_page_view_count(
            self.query(slug=slug, start_date=start_date, end_date=end_date),
            client_factory=self.client_factory
        )

    def __repr__(self):
        return f"PageViewFetcher object: GA4 Property ID {self.property_id}"
