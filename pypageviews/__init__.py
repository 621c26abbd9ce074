"""
PyPageViews fetches the page-view count of a single page path from Google Analytics 4.

To start, you must first create a service account and save the JSON key file locally:
https://developers.google.com/analytics/devguides/reporting/data/v1/quickstart-client-libraries
Also, give the service account email address access (at least "Viewer" level) to the GA4 property
you want to query.

Follow the implementation example below:

```
import asyncio
from pypageviews import get_page_view_count

views = asyncio.run(get_page_view_count(
  slug='/blog/my-post',
  property_id='<ga4-property-id>',
  key_file_path='<path-to-your-key-file>',
  start_date='2023-01-01'
))
```

or, holding the credentials in a client object:

```
from pypageviews.client import PageViewClient
page_view_client = PageViewClient.build(key_file_path='<path-to-your-key-file>')
fetcher = page_view_client.fetcher(property_id='<ga4-property-id>')
views = asyncio.run(fetcher.page_views(slug='/blog/my-post', start_date='30daysAgo'))
```
"""

__version__ = "0.1.0"
__author__ = 'Joshua Prettyman'
__credits__ = 'Blink SEO'

import logging

ppv_logger = logging.getLogger(__name__)


from .page_views import ViewQuery, AnalyticsFetchError, fetch_page_view_count, get_page_view_count
from .client import PageViewClient, PageViewFetcher
