"""
Testes dos publicadores de eventos.
"""

import logging

from src.adapters.django_app.events.publishers import InMemoryEventPublisher, LoggingEventPublisher
from src.core.workforce.events import EmployeeTransferredEvent


def _event(employee_id=7):
    return EmployeeTransferredEvent(aggregate_id=employee_id, from_department_id=1, to_department_id=2)


class TestLoggingEventPublisher:

    def test_loga_evento(self, caplog):
        publisher = LoggingEventPublisher()

        with caplog.at_level(logging.INFO, logger="src.adapters.django_app.events.publishers"):
            publisher.publish(_event())

        assert "[EVENT] EmployeeTransferredEvent" in caplog.text
        assert "aggregate=Employee:7" in caplog.text

    def test_handler_com_erro_nao_interrompe_os_demais(self):
        publisher = LoggingEventPublisher()
        received = []

        def broken(event):
            raise RuntimeError("handler down")

        publisher.register_handler("EmployeeTransferredEvent", broken)
        publisher.register_handler("EmployeeTransferredEvent", received.append)
        publisher.publish(_event())

        assert len(received) == 1


class TestInMemoryEventPublisher:

    def test_publish_batch_e_filtro_por_tipo(self):
        publisher = InMemoryEventPublisher()

        publisher.publish_batch([_event(1), _event(2)])

        assert [e.aggregate_id for e in publisher.get_events_by_type("EmployeeTransferredEvent")] == [1, 2]
        assert publisher.get_events_by_type("OtherEvent") == []

    def test_clear(self):
        publisher = InMemoryEventPublisher()
        publisher.publish(_event())

        publisher.clear()

        assert publisher.published_events == []
