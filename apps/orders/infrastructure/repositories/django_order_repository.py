"""
Django ORM implementation of OrderRepository.
"""
from datetime import datetime
from decimal import Decimal
from typing import Dict, List, Optional, Tuple
from uuid import UUID

from django.db import transaction
from django.db.models import Count, F, Sum
from django.utils.dateparse import parse_datetime

from apps.catalog.domain.value_objects import ClothingCategory, ServiceType
from ...domain.entities.order import Order
from ...domain.entities.order_item import OrderItem
from ...domain.exceptions import ConcurrentOrderUpdateError
from ...domain.repositories.order_repository import OrderRepository
from ...domain.value_objects.address import Address
from ...domain.value_objects.order_pricing import OrderPricing
from ...domain.value_objects.order_status import TERMINAL_STATUSES, OrderStatus
from ...domain.value_objects.status_history_entry import StatusHistoryEntry
from ..models.order_model import OrderModel

TERMINAL_VALUES = [status.value for status in TERMINAL_STATUSES]


class DjangoOrderRepository(OrderRepository):
    """Django ORM based order repository implementation."""

    def save(self, order: Order) -> Order:
        """Save an order entity."""
        fields = self._to_fields(order)
        with transaction.atomic():
            if order.is_new:
                model = OrderModel.objects.create(
                    id=order.id,
                    customer_id=order.customer_id,
                    created_at=order.created_at,
                    version=1,
                    **fields,
                )
                order.version = model.version
                return self._to_entity(model)

            updated = OrderModel.objects.filter(id=order.id, version=order.version).update(
                version=F('version') + 1,
                **fields,
            )
            if updated == 0:
                raise ConcurrentOrderUpdateError(str(order.id))

            model = OrderModel.objects.get(id=order.id)
            order.version = model.version
            return self._to_entity(model)

    def find_by_id(self, order_id: UUID) -> Optional[Order]:
        """Find an order by ID."""
        try:
            model = OrderModel.objects.get(id=order_id)
            return self._to_entity(model)
        except OrderModel.DoesNotExist:
            return None

    def find_by_customer(self, customer_id: UUID) -> List[Order]:
        queryset = OrderModel.objects.filter(customer_id=customer_id).order_by('-created_at')
        return [self._to_entity(model) for model in queryset]

    def find_active_by_delivery_person(self, delivery_person_id: UUID) -> List[Order]:
        queryset = (
            OrderModel.objects
            .filter(delivery_person_id=delivery_person_id)
            .exclude(status__in=TERMINAL_VALUES)
            .order_by('-created_at')
        )
        return [self._to_entity(model) for model in queryset]

    def find_finished_by_delivery_person(self, delivery_person_id: UUID) -> List[Order]:
        queryset = (
            OrderModel.objects
            .filter(delivery_person_id=delivery_person_id, status__in=TERMINAL_VALUES)
            .order_by('-created_at')
        )
        return [self._to_entity(model) for model in queryset]

    def find_unassigned(self) -> List[Order]:
        queryset = (
            OrderModel.objects
            .filter(delivery_person__isnull=True, status=OrderStatus.REQUESTED.value)
            .order_by('created_at')
        )
        return [self._to_entity(model) for model in queryset]

    def find_all(
        self,
        status: Optional[OrderStatus] = None,
        offset: int = 0,
        limit: int = 20,
    ) -> List[Order]:
        queryset = self._status_queryset(status).order_by('-created_at')[offset:offset + limit]
        return [self._to_entity(model) for model in queryset]

    def count(self, status: Optional[OrderStatus] = None) -> int:
        return self._status_queryset(status).count()

    def count_by_status(self, delivery_person_id: Optional[UUID] = None) -> Dict[OrderStatus, int]:
        queryset = OrderModel.objects.all()
        if delivery_person_id is not None:
            queryset = queryset.filter(delivery_person_id=delivery_person_id)
        rows = queryset.order_by().values('status').annotate(count=Count('id'))
        return {OrderStatus(row['status']): row['count'] for row in rows}

    def created_since(self, since: datetime) -> Tuple[int, Decimal]:
        totals = OrderModel.objects.filter(created_at__gte=since).aggregate(
            count=Count('id'),
            revenue=Sum('grand_total'),
        )
        return totals['count'] or 0, totals['revenue'] or Decimal('0')

    def count_delivered_since(self, delivery_person_id: UUID, since: datetime) -> int:
        return self._delivered(delivery_person_id).filter(updated_at__gte=since).count()

    def delivered_revenue(self, delivery_person_id: UUID) -> Decimal:
        total = self._delivered(delivery_person_id).aggregate(revenue=Sum('grand_total'))['revenue']
        return total or Decimal('0')

    def delivered_timings(self, delivery_person_id: UUID) -> List[Tuple[datetime, datetime]]:
        return list(self._delivered(delivery_person_id).values_list('created_at', 'updated_at'))

    def _delivered(self, delivery_person_id: UUID):
        return OrderModel.objects.filter(
            delivery_person_id=delivery_person_id,
            status=OrderStatus.DELIVERED.value,
        )

    def _status_queryset(self, status: Optional[OrderStatus]):
        queryset = OrderModel.objects.all()
        if status is not None:
            queryset = queryset.filter(status=status.value)
        return queryset

    def _to_fields(self, order: Order) -> dict:
        """Columns written on every save."""
        return {
            'delivery_person_id': order.delivery_person_id,
            'status': order.status.value,
            'items': [self._item_to_dict(item) for item in order.items],
            'status_history': [self._history_to_dict(entry) for entry in order.status_history],
            'pickup_address': order.pickup_address.to_dict(),
            'delivery_address': order.delivery_address.to_dict(),
            'items_total': order.pricing.items_total,
            'delivery_charge': order.pricing.delivery_charge,
            'grand_total': order.pricing.grand_total,
            'notes': order.notes,
            'scheduled_pickup_time': order.scheduled_pickup_time,
            'estimated_delivery_time': order.estimated_delivery_time,
            'updated_at': order.updated_at,
        }

    @staticmethod
    def _item_to_dict(item: OrderItem) -> dict:
        return {
            'clothing_item_id': str(item.clothing_item_id),
            'clothing_item_name': item.clothing_item_name,
            'category': item.category.value,
            'services': [service.value for service in item.services],
            'quantity': item.quantity,
            'unit_price': str(item.unit_price),
            'subtotal': str(item.subtotal),
        }

    @staticmethod
    def _history_to_dict(entry: StatusHistoryEntry) -> dict:
        return {
            'status': entry.status.value,
            'timestamp': entry.timestamp.isoformat(),
            'note': entry.note,
            'updated_by': str(entry.updated_by),
        }

    def _to_entity(self, model: OrderModel) -> Order:
        """Convert Django model to domain entity."""
        return Order(
            id=model.id,
            customer_id=model.customer_id,
            items=[
                OrderItem(
                    clothing_item_id=UUID(row['clothing_item_id']),
                    clothing_item_name=row['clothing_item_name'],
                    category=ClothingCategory(row['category']),
                    services=tuple(ServiceType(value) for value in row['services']),
                    quantity=row['quantity'],
                    unit_price=Decimal(row['unit_price']),
                    subtotal=Decimal(row['subtotal']),
                )
                for row in model.items
            ],
            pricing=OrderPricing(
                items_total=model.items_total,
                delivery_charge=model.delivery_charge,
                grand_total=model.grand_total,
            ),
            pickup_address=Address.from_dict(model.pickup_address),
            delivery_address=Address.from_dict(model.delivery_address),
            status=OrderStatus(model.status),
            status_history=[
                StatusHistoryEntry(
                    status=OrderStatus(row['status']),
                    timestamp=parse_datetime(row['timestamp']),
                    note=row['note'],
                    updated_by=UUID(row['updated_by']),
                )
                for row in model.status_history
            ],
            delivery_person_id=model.delivery_person_id,
            notes=model.notes,
            scheduled_pickup_time=model.scheduled_pickup_time,
            estimated_delivery_time=model.estimated_delivery_time,
            version=model.version,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
