import django_filters

from modules.orders.models import Order


class OrderFilter(django_filters.FilterSet):
    user_id = django_filters.CharFilter(field_name="user_id", lookup_expr="exact")
    status = django_filters.CharFilter(field_name="status", lookup_expr="iexact")
    start_date = django_filters.DateFilter(field_name="order_date", lookup_expr="gte")
    end_date = django_filters.DateFilter(field_name="order_date", lookup_expr="lte")
    min_total = django_filters.NumberFilter(
        field_name="total_amount", lookup_expr="gte"
    )
    max_total = django_filters.NumberFilter(
        field_name="total_amount", lookup_expr="lte"
    )

    class Meta:
        model = Order
        fields = [
            "user_id",
            "status",
            "start_date",
            "end_date",
            "min_total",
            "max_total",
        ]
