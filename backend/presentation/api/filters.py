"""
Sorting filter for list endpoints.

Clients sort with `?sortBy=<field>&sortDir=asc|desc`. Field names may be
camelCase or snake_case and must belong to the view's `ordering_fields`;
unknown names are ignored.
"""

import re

from rest_framework.filters import OrderingFilter

_CAMEL_BOUNDARY = re.compile(r'(?<!^)(?=[A-Z])')


def to_snake_case(name: str) -> str:
    return _CAMEL_BOUNDARY.sub('_', name.strip()).lower()


class SortParameterFilter(OrderingFilter):
    """
    OrderingFilter driven by `sortBy` and `sortDir`.

    Without `sortBy`, a queryset that already carries an explicit ordering
    (over-budget items by excess, hierarchy order...) keeps it; otherwise the
    view's default `ordering` applies.
    """

    sort_by_param = 'sortBy'
    sort_dir_param = 'sortDir'
    ordering_description = 'Field to sort by (camelCase or snake_case).'

    def get_ordering(self, request, queryset, view):
        sort_by = request.query_params.get(self.sort_by_param)
        if sort_by:
            field = to_snake_case(sort_by)
            valid_fields = [item[0] for item in self.get_valid_fields(queryset, view, {'request': request})]
            if field in valid_fields:
                descending = request.query_params.get(self.sort_dir_param, 'asc').lower() == 'desc'
                return [f'-{field}' if descending else field, 'pk']
        if queryset.query.order_by:
            return None
        return self.get_default_ordering(view)

    def filter_queryset(self, request, queryset, view):
        ordering = self.get_ordering(request, queryset, view)
        if ordering:
            return queryset.order_by(*ordering)
        return queryset

    def get_schema_operation_parameters(self, view):
        return [
            {
                'name': self.sort_by_param,
                'required': False,
                'in': 'query',
                'description': self.ordering_description,
                'schema': {'type': 'string'},
            },
            {
                'name': self.sort_dir_param,
                'required': False,
                'in': 'query',
                'description': 'Sort direction: asc (default) or desc.',
                'schema': {'type': 'string', 'enum': ['asc', 'desc']},
            },
        ]
