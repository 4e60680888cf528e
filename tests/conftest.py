import os

import django
import pytest

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "SiteBuild.settings")
django.setup()


@pytest.fixture(autouse=True)
def _fresh_default_site():
    from blocks.site import reset_default_site

    reset_default_site()
    yield
    reset_default_site()
