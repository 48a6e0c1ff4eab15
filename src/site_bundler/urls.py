"""URLconf for the development server: contact relay plus the built site."""

from django.urls import path, re_path

from .conf import get_setting, load_build_config, load_contact_config
from .contact import ContactFormView
from .views import serve_output

document_root = get_setting("SERVE_ROOT") or load_build_config().output_root

urlpatterns = [
    path(
        "api/contact/",
        ContactFormView.as_view(config=load_contact_config()),
        name="contact",
    ),
    re_path(
        r"^(?P<path>.*)$",
        serve_output,
        {"document_root": document_root},
        name="site",
    ),
]
