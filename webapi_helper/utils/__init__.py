"""Utility functions."""

from webapi_helper.utils.datetime_utils import parse_search_datetime, parse_search_int
from webapi_helper.utils.request_helper import parse_form_body

__all__ = ["parse_form_body", "parse_search_datetime", "parse_search_int"]
