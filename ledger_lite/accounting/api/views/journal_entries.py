# accounting/api/views/journal_entries.py

"""
PATH: accounting/api/views/journal_entries.py

JOURNAL ENTRIES API

POST  /api/journal-entries        -> 201 {id}
GET   /api/journal-entries        -> 200 [{id, entryDate, description, debitTotal, creditTotal}]
GET   /api/journal-entries/{id}   -> 200 detail with lines, 404 if absent
PATCH /api/journal-entries/{id}   -> 200 detail (description only), 404 if absent

Views only parse/shape; rules live in JournalEntryService.
Failures propagate as LedgerError and are rendered by
accounting.api.exception_handler.
"""

from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from accounting.api.serializers.journal_entries import (
    JournalEntryCreateResponseSerializer,
    JournalEntryCreateSerializer,
    JournalEntryDetailSerializer,
    JournalEntrySummarySerializer,
    JournalEntryUpdateSerializer,
)
from accounting.services.journal_entry_service import (
    JournalEntryService,
    default_service,
)


class _JournalServiceMixin:
    def get_service(self) -> JournalEntryService:
        return default_service()


class JournalEntryListCreateView(_JournalServiceMixin, APIView):
    @extend_schema(
        tags=["journal-entries"],
        responses=JournalEntrySummarySerializer(many=True),
    )
    def get(self, request, *args, **kwargs):
        summaries = self.get_service().list_summaries()
        return Response(
            JournalEntrySummarySerializer(summaries, many=True).data,
            status=status.HTTP_200_OK,
        )

    @extend_schema(
        tags=["journal-entries"],
        request=JournalEntryCreateSerializer,
        responses={201: JournalEntryCreateResponseSerializer, 400: dict, 404: dict},
    )
    def post(self, request, *args, **kwargs):
        s = JournalEntryCreateSerializer(data=request.data)
        s.is_valid(raise_exception=True)
        data = s.validated_data

        entry_id = self.get_service().create(
            entry_date=data["entry_date"],
            description=data["description"],
            lines=[dict(line) for line in data["lines"]],
        )
        return Response({"id": entry_id}, status=status.HTTP_201_CREATED)


class JournalEntryDetailView(_JournalServiceMixin, APIView):
    @extend_schema(
        tags=["journal-entries"],
        responses={200: JournalEntryDetailSerializer, 404: dict},
    )
    def get(self, request, pk: int, *args, **kwargs):
        detail = self.get_service().get(pk)
        return Response(JournalEntryDetailSerializer(detail).data, status=status.HTTP_200_OK)

    @extend_schema(
        tags=["journal-entries"],
        request=JournalEntryUpdateSerializer,
        responses={200: JournalEntryDetailSerializer, 400: dict, 404: dict},
    )
    def patch(self, request, pk: int, *args, **kwargs):
        s = JournalEntryUpdateSerializer(data=request.data)
        s.is_valid(raise_exception=True)

        detail = self.get_service().update_description(pk, s.validated_data["description"])
        return Response(JournalEntryDetailSerializer(detail).data, status=status.HTTP_200_OK)
