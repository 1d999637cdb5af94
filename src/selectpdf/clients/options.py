"""
Option setters shared by clients that produce PDF documents.
"""

from ..enums import PageLayout, PageMode


class PdfDocumentOptionsMixin:
    """Document information, viewer preferences and security options.

    Requires the host class to provide ``_set(name, value)``.
    """

    def set_doc_title(self, doc_title: str):
        return self._set("doc_title", doc_title)

    def set_doc_subject(self, doc_subject: str):
        return self._set("doc_subject", doc_subject)

    def set_doc_keywords(self, doc_keywords: str):
        return self._set("doc_keywords", doc_keywords)

    def set_doc_author(self, doc_author: str):
        return self._set("doc_author", doc_author)

    def set_doc_add_creation_date(self, doc_add_creation_date: bool):
        return self._set("doc_add_creation_date", doc_add_creation_date)

    def set_viewer_page_layout(self, page_layout: PageLayout):
        return self._set("viewer_page_layout", PageLayout(page_layout))

    def set_viewer_page_mode(self, page_mode: PageMode):
        return self._set("viewer_page_mode", PageMode(page_mode))

    def set_viewer_center_window(self, viewer_center_window: bool):
        return self._set("viewer_center_window", viewer_center_window)

    def set_viewer_display_doc_title(self, viewer_display_doc_title: bool):
        return self._set("viewer_display_doc_title", viewer_display_doc_title)

    def set_viewer_fit_window(self, viewer_fit_window: bool):
        return self._set("viewer_fit_window", viewer_fit_window)

    def set_viewer_hide_menu_bar(self, viewer_hide_menu_bar: bool):
        return self._set("viewer_hide_menu_bar", viewer_hide_menu_bar)

    def set_viewer_hide_toolbar(self, viewer_hide_toolbar: bool):
        return self._set("viewer_hide_toolbar", viewer_hide_toolbar)

    def set_viewer_hide_window_ui(self, viewer_hide_window_ui: bool):
        return self._set("viewer_hide_window_ui", viewer_hide_window_ui)

    def set_user_password(self, user_password: str):
        return self._set("user_password", user_password)

    def set_owner_password(self, owner_password: str):
        return self._set("owner_password", owner_password)

    def set_timeout(self, timeout: int):
        """Maximum number of seconds the conversion is allowed to run server-side."""
        return self._set("timeout", timeout)
