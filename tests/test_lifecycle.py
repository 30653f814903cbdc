"""Tests for appointment status transitions and deletion."""

import pytest
from conftest import make_appointment

from salonbook.domain.appointments import lifecycle
from salonbook.domain.appointments.service import AppointmentService
from salonbook.exceptions import InvalidTransitionException, NotFoundException
from salonbook.models import Appointment


class TestTransitionTable:
    @pytest.mark.parametrize(
        "current, action, expected",
        [
            ("pending", "confirm", "confirmed"),
            ("pending", "cancel", "cancelled"),
            ("confirmed", "cancel", "cancelled"),
            ("confirmed", "complete", "completed"),
        ],
    )
    def test_allowed_transitions(self, current, action, expected):
        assert lifecycle.next_status(current, action) == expected

    @pytest.mark.parametrize(
        "current, action",
        [
            ("confirmed", "confirm"),
            ("cancelled", "cancel"),
            ("completed", "complete"),
        ],
    )
    def test_repeating_an_action_is_a_no_op(self, current, action):
        assert lifecycle.next_status(current, action) == current

    @pytest.mark.parametrize(
        "current, action",
        [
            ("cancelled", "confirm"),
            ("cancelled", "complete"),
            ("completed", "cancel"),
            ("completed", "confirm"),
            ("pending", "complete"),
        ],
    )
    def test_invalid_transitions(self, current, action):
        with pytest.raises(InvalidTransitionException) as exc_info:
            lifecycle.next_status(current, action)
        assert exc_info.value.details["current_status"] == current

    def test_unknown_action(self):
        with pytest.raises(ValueError):
            lifecycle.next_status("pending", "archive")

    def test_allowed_actions(self):
        assert lifecycle.allowed_actions("pending") == ["confirm", "cancel", "delete"]
        assert lifecycle.allowed_actions("confirmed") == ["cancel", "complete", "delete"]
        assert lifecycle.allowed_actions("cancelled") == ["delete"]
        assert lifecycle.allowed_actions("completed") == ["delete"]

    def test_same_status_transition_is_valid(self):
        assert lifecycle.validate_status_transition("pending", "pending")
        assert not lifecycle.validate_status_transition("completed", "pending")


class TestAppointmentService:
    def test_confirm_pending(self, db, salon_setup):
        appointment = make_appointment(db, salon_setup.salon, salon_setup.professional, status="pending")

        result = AppointmentService(db).confirm(salon_setup.salon.id, appointment.id)

        assert result.status == "confirmed"

    def test_scope_to_other_salon_is_not_found(self, db, salon_setup):
        appointment = make_appointment(db, salon_setup.salon, salon_setup.professional, status="pending")

        with pytest.raises(NotFoundException):
            AppointmentService(db).confirm(salon_setup.other_salon.id, appointment.id)

    def test_scope_to_other_professional_is_not_found(self, db, salon_setup):
        appointment = make_appointment(db, salon_setup.salon, salon_setup.professional, status="pending")

        with pytest.raises(NotFoundException):
            AppointmentService(db).cancel(
                salon_setup.salon.id, appointment.id, professional_id=salon_setup.other_professional.id
            )

    def test_invalid_transition_leaves_status_unchanged(self, db, salon_setup):
        appointment = make_appointment(db, salon_setup.salon, salon_setup.professional, status="cancelled")

        with pytest.raises(InvalidTransitionException):
            AppointmentService(db).confirm(salon_setup.salon.id, appointment.id)

        db.refresh(appointment)
        assert appointment.status == "cancelled"


class TestLifecycleEndpoints:
    def url(self, setup, appointment_id, action=""):
        base = f"/salons/{setup.salon.id}/appointments/{appointment_id}"
        return f"{base}/{action}" if action else base

    def test_confirm_returns_status_and_allowed_actions(self, client, db, salon_setup):
        appointment = make_appointment(db, salon_setup.salon, salon_setup.professional, status="pending")

        response = client.post(self.url(salon_setup, appointment.id, "confirm"))

        assert response.status_code == 200
        assert response.json() == {
            "id": appointment.id,
            "status": "confirmed",
            "allowedActions": ["cancel", "complete", "delete"],
        }

    def test_confirm_twice_is_idempotent(self, client, db, salon_setup):
        appointment = make_appointment(db, salon_setup.salon, salon_setup.professional, status="pending")

        client.post(self.url(salon_setup, appointment.id, "confirm"))
        response = client.post(self.url(salon_setup, appointment.id, "confirm"))

        assert response.status_code == 200
        assert response.json()["status"] == "confirmed"

    def test_confirm_cancelled_is_409(self, client, db, salon_setup):
        appointment = make_appointment(db, salon_setup.salon, salon_setup.professional, status="cancelled")

        response = client.post(self.url(salon_setup, appointment.id, "confirm"))

        assert response.status_code == 409
        body = response.json()
        assert body["code"] == "INVALID_TRANSITION"
        assert body["details"]["allowed_actions"] == ["delete"]

    def test_complete_confirmed(self, client, db, salon_setup):
        appointment = make_appointment(db, salon_setup.salon, salon_setup.professional, status="confirmed")

        response = client.post(self.url(salon_setup, appointment.id, "complete"))

        assert response.status_code == 200
        assert response.json()["status"] == "completed"

    def test_complete_pending_is_409(self, client, db, salon_setup):
        appointment = make_appointment(db, salon_setup.salon, salon_setup.professional, status="pending")
        response = client.post(self.url(salon_setup, appointment.id, "complete"))
        assert response.status_code == 409

    def test_cancel_with_matching_professional_scope(self, client, db, salon_setup):
        appointment = make_appointment(db, salon_setup.salon, salon_setup.professional, status="confirmed")

        response = client.post(
            self.url(salon_setup, appointment.id, "cancel"),
            params={"professional_id": salon_setup.professional.id},
        )

        assert response.status_code == 200
        assert response.json()["status"] == "cancelled"

    def test_unknown_appointment_is_404(self, client, salon_setup):
        response = client.post(self.url(salon_setup, "00000000-0000-4000-8000-00000000dead", "cancel"))
        assert response.status_code == 404

    def test_delete_then_delete_again(self, client, db, salon_setup):
        appointment = make_appointment(db, salon_setup.salon, salon_setup.professional, status="completed")
        appointment_id = appointment.id

        first = client.delete(self.url(salon_setup, appointment_id))
        second = client.delete(self.url(salon_setup, appointment_id))

        assert first.status_code == 204
        assert second.status_code == 404
        assert db.query(Appointment).filter(Appointment.id == appointment_id).first() is None

    def test_delete_from_other_salon_is_404(self, client, db, salon_setup):
        appointment = make_appointment(db, salon_setup.salon, salon_setup.professional)

        response = client.delete(f"/salons/{salon_setup.other_salon.id}/appointments/{appointment.id}")

        assert response.status_code == 404
        assert db.query(Appointment).count() == 1
