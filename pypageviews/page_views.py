import dataclasses
import datetime
import re
from typing import Any, Callable, Union

import google.analytics.data_v1beta.types as ga_data_types

from .utils import general_utils
from .utils.resource_utils import build_ga4_client
from . import ppv_logger

PAGE_PATH_DIMENSION = 'pagePath'
PAGE_VIEWS_METRIC = 'screenPageViews'

RE_METRIC_COUNT = re.compile(r"[0-9]+")


class AnalyticsFetchError(Exception):
    """Error raised when the page view count could not be fetched from Google Analytics"""
    def __init__(self, message="Error fetching data from Google Analytics", cause: BaseException = None):
        self.message = message
        self.cause = cause
        super().__init__(self.message)


@dataclasses.dataclass(frozen=True)
class ViewQuery:
    """
    The arguments of a single page view lookup.
    - slug: the page path to match exactly, e.g. `/blog/my-post`
    - property_id: the GA4 property id
    - credential_ref: path to a service account key file, or the key as a json str, bytes or dict
    - start_date, end_date: `YYYY-MM-DD`, `today`, `yesterday`, `NdaysAgo` or a datetime.date
    """
    slug: str
    property_id: str
    credential_ref: Union[str, bytes, dict] = dataclasses.field(repr=False)
    start_date: Union[str, datetime.date]
    end_date: Union[str, datetime.date] = 'today'


def build_page_view_request(query: ViewQuery) -> ga_data_types.RunReportRequest:
    if not isinstance(query.slug, str) or not query.slug:
        raise ValueError("slug must be a non-empty string")

    return ga_data_types.RunReportRequest(
        property=general_utils.property_resource_name(query.property_id),
        date_ranges=[
            ga_data_types.DateRange(
                start_date=general_utils.ga4_date_string(query.start_date),
                end_date=general_utils.ga4_date_string(query.end_date)
            )
        ],
        dimensions=[ga_data_types.Dimension(name=PAGE_PATH_DIMENSION)],
        metrics=[ga_data_types.Metric(name=PAGE_VIEWS_METRIC)],
        dimension_filter=ga_data_types.FilterExpression(
            filter=ga_data_types.Filter(
                field_name=PAGE_PATH_DIMENSION,
                string_filter=ga_data_types.Filter.StringFilter(
                    match_type=ga_data_types.Filter.StringFilter.MatchType.EXACT,
                    value=query.slug
                )
            )
        )
    )


def parse_page_view_count(response: ga_data_types.RunReportResponse) -> int:
    """
    Read the page view count from a report response.
    An empty response means no views were recorded, so the count is 0.
    A row with a missing or non-numeric metric value raises IndexError or ValueError.
    """
    rows = response.rows
    if not rows:
        return 0

    value = rows[0].metric_values[0].value
    if not RE_METRIC_COUNT.fullmatch(value):
        raise ValueError(f"page view count is not a non-negative integer: '{value}'")
    return int(value)


async def fetch_page_view_count(query: ViewQuery,
                                client_factory: Callable[[Any], Any] = None) -> int:
    """
    Fetch the number of page views recorded for `query.slug` between the query dates.
    @param query: the ViewQuery to run
    @param client_factory: called with `query.credential_ref`, returns an async context manager yielding an object with an async `run_report` method.
    Defaults to building a BetaAnalyticsDataAsyncClient from the service account key.
    A new client is built for every call and closed once the report has been fetched.
    @returns: the page view count, 0 if GA4 returned no rows
    @raises AnalyticsFetchError: on any failure, with the original exception as `cause`
    """
    if client_factory is None:
        client_factory = build_ga4_client

    try:
        request = build_page_view_request(query)
        async with client_factory(query.credential_ref) as ga4_client:
            ppv_logger.debug(f"fetch_page_view_count() :: requesting {PAGE_VIEWS_METRIC} for '{query.slug}' "
                             f"from {request.property}")
            ga4_response = await ga4_client.run_report(request)
        return parse_page_view_count(ga4_response)
    except Exception as _e:
        ppv_logger.error(f"fetch_page_view_count() :: {general_utils.error_type(_e)} "
                         f"fetching data from Google Analytics for '{query.slug}': {_e!r}",
                         exc_info=_e)
        raise AnalyticsFetchError(cause=_e) from _e


async def get_page_view_count(slug: str,
                              property_id: str,
                              key_file_path: str,
                              start_date: Union[str, datetime.date],
                              end_date: Union[str, datetime.date] = 'today') -> int:
    query = ViewQuery(
        slug=slug,
        property_id=property_id,
        credential_ref=key_file_path,
        start_date=start_date,
        end_date=end_date
    )
    return await fetch_page_view_count(query)
