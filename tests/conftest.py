import os

import pytest

# Set environment variables for tests before any imports happen
os.environ["SUPABASE_URL"] = "https://project.supabase.test"
os.environ["SUPABASE_ANON_KEY"] = "test_anon_key"
os.environ["FETCH_TIMEOUT"] = "15"
os.environ["CORS_ALLOW_ORIGINS"] = "*"

from job_listing_extractor.extractor import JobListingExtractor  # noqa: E402

JOB_POSTING_HTML = """
<!DOCTYPE html>
<html>
<head>
    <title>Careers | Acme</title>
    <meta property="og:title" content="Open role at Acme">
    <meta property="og:site_name" content="Acme Careers">
    <meta name="description" content="Meta description">
    <script type="application/ld+json">
    {
        "@context": "https://schema.org",
        "@type": "JobPosting",
        "title": "Senior Backend Engineer",
        "description": "<p>Build &amp; run our <b>APIs</b>.</p>",
        "hiringOrganization": {"@type": "Organization", "name": "Acme Corp"},
        "jobLocation": [
            {
                "@type": "Place",
                "address": {
                    "addressLocality": "Berlin",
                    "addressRegion": "BE",
                    "addressCountry": "DE"
                }
            }
        ]
    }
    </script>
</head>
<body><h1>Senior Backend Engineer</h1></body>
</html>
"""

META_ONLY_HTML = """
<!DOCTYPE html>
<html>
<head>
    <title>Document Title</title>
    <meta content="Data Analyst" property="og:title">
    <meta property="og:description" content="Crunch numbers &amp; tell stories.">
    <meta property="og:site_name" content="Globex">
</head>
<body></body>
</html>
"""

BARE_HTML = "<html><body><p>Nothing to see here.</p></body></html>"


@pytest.fixture
def extractor():
    """An extractor with the default fetch settings."""
    return JobListingExtractor()


@pytest.fixture
def job_posting_html():
    """A page carrying a JSON-LD JobPosting alongside conflicting meta tags."""
    return JOB_POSTING_HTML


@pytest.fixture
def meta_only_html():
    """A page with Open Graph tags but no structured data."""
    return META_ONLY_HTML


@pytest.fixture
def bare_html():
    """A page with no title, meta tags or structured data."""
    return BARE_HTML
