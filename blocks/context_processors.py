from .site import SITE_CONTEXT_KEY, get_default_site


def site(request):
    """Expose the default site to templates rendered with a request."""
    return {SITE_CONTEXT_KEY: get_default_site()}
