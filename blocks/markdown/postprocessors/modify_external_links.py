from urllib.parse import urlsplit

from bs4 import BeautifulSoup
from django.conf import settings


def _site_host(context):
    site_url = context.get("site_url") or getattr(settings, "MARKDOWN_SITE_URL", "")
    return urlsplit(site_url).netloc.lower() if site_url else ""


def modify_external_links(html, context):
    """
    Add target="_blank" and rel="noopener noreferrer" to external links.

    A link is external when it is absolute http(s) and its host differs
    from the site URL's host (context "site_url", else the
    MARKDOWN_SITE_URL setting).
    """
    soup = BeautifulSoup(html, "html.parser")
    site_host = _site_host(context)

    for link in soup.find_all("a", href=True):
        href = link["href"]

        if not href.startswith(("http://", "https://")):
            continue
        if site_host and urlsplit(href).netloc.lower() == site_host:
            continue

        link["target"] = "_blank"
        link["rel"] = "noopener noreferrer"

        if "class" in link.attrs:
            if "external-link" not in link["class"]:
                link["class"].append("external-link")
        else:
            link["class"] = ["external-link"]

    return str(soup)
