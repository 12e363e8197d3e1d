"""
Custom pagination classes for the API.
"""

from rest_framework.pagination import PageNumberPagination
from rest_framework.response import Response
from rest_framework.utils.urls import remove_query_param, replace_query_param


class StandardResultsSetPagination(PageNumberPagination):
    """
    Zero-based page number pagination.

    Clients request `?page=N&size=M`; `page` starts at 0 and `size`
    defaults to 20 with a maximum of 1000. A page past the end answers 404.
    """
    page_size = 20
    page_query_param = 'page'
    page_size_query_param = 'size'
    max_page_size = 1000

    def get_page_number(self, request, paginator):
        raw = request.query_params.get(self.page_query_param)
        if raw is None or raw in self.last_page_strings:
            return raw or 1
        try:
            return int(raw) + 1
        except (TypeError, ValueError):
            return raw

    def get_next_link(self):
        if not self.page.has_next():
            return None
        url = self.request.build_absolute_uri()
        return replace_query_param(url, self.page_query_param, self.page.next_page_number() - 1)

    def get_previous_link(self):
        if not self.page.has_previous():
            return None
        url = self.request.build_absolute_uri()
        previous = self.page.previous_page_number() - 1
        if previous == 0:
            return remove_query_param(url, self.page_query_param)
        return replace_query_param(url, self.page_query_param, previous)

    def get_paginated_response(self, data):
        return Response({
            'count': self.page.paginator.count,
            'total_pages': self.page.paginator.num_pages,
            'page': self.page.number - 1,
            'size': self.page.paginator.per_page,
            'next': self.get_next_link(),
            'previous': self.get_previous_link(),
            'results': data,
        })

    def get_paginated_response_schema(self, schema):
        response_schema = super().get_paginated_response_schema(schema)
        response_schema['properties'].update({
            'total_pages': {'type': 'integer', 'example': 5},
            'page': {'type': 'integer', 'example': 0},
            'size': {'type': 'integer', 'example': self.page_size},
        })
        return response_schema
