"""Tests for the appointment and review stores."""
import threading

import pytest
from unittest.mock import Mock

from medicare_client.envelope import Failure, Success
from medicare_client.stores.appointments import AppointmentStore
from medicare_client.stores.base import Action
from medicare_client.stores.resources import (
    ResourceAction,
    ResourceState,
    ResourceStore,
    make_resource_reducer,
)
from medicare_client.stores.reviews import ReviewStore

APPOINTMENTS = [
    {"_id": "a1", "status": "pending", "doctor": "d1"},
    {"_id": "a2", "status": "pending", "doctor": "d2"},
]


@pytest.fixture
def appointment_service():
    service = Mock()
    service.get_patient_appointments.return_value = Success(data=list(APPOINTMENTS))
    service.get_doctor_appointments.return_value = Success(data=[APPOINTMENTS[0]])
    service.create.return_value = Success(data={"_id": "a3", "status": "pending"})
    service.update_status.return_value = Success(data={"_id": "a1", "status": "confirmed"})
    service.delete.return_value = Success(message="Appointment cancelled")
    return service


@pytest.fixture
def appointments(appointment_service, notifier) -> AppointmentStore:
    store = AppointmentStore(appointment_service, notifier)
    store.fetch_collection()
    return store


@pytest.fixture
def review_service():
    service = Mock()
    service.get_doctor_reviews.return_value = Success(data=[{"_id": "r1", "rating": 4}])
    service.create.return_value = Success(data={"_id": "r2", "rating": 5})
    service.update.return_value = Success(data={"_id": "r1", "rating": 2})
    service.delete.return_value = Success()
    return service


@pytest.fixture
def reviews(review_service, notifier) -> ReviewStore:
    store = ReviewStore(review_service, notifier)
    store.fetch_collection("d1")
    return store


class TestFetch:

    def test_patient_fetch_without_owner(self, appointments, appointment_service):
        appointment_service.get_patient_appointments.assert_called_once_with()
        assert appointments.appointments == tuple(APPOINTMENTS)
        assert appointments.state.is_loading is False

    def test_doctor_fetch_with_owner(self, appointments, appointment_service):
        result = appointments.fetch_collection("d1")

        appointment_service.get_doctor_appointments.assert_called_once_with("d1")
        assert result.data == [APPOINTMENTS[0]]
        assert appointments.appointments == (APPOINTMENTS[0],)

    def test_empty_result_is_success(self, appointment_service, notifier):
        appointment_service.get_patient_appointments.return_value = Success(data=None)
        store = AppointmentStore(appointment_service, notifier)

        result = store.fetch_collection()

        assert result.success is True
        assert result.data == []
        assert store.appointments == ()
        assert notifier.messages == []

    def test_fetch_failure_keeps_items_and_notifies(self, appointments, appointment_service, notifier):
        appointment_service.get_patient_appointments.return_value = Failure(message="Not authorized", status=401)

        result = appointments.fetch_collection()

        assert result == Failure(message="Not authorized", status=401)
        assert appointments.appointments == tuple(APPOINTMENTS)
        assert appointments.state.error == "Not authorized"
        assert notifier.errors == ["Not authorized"]

    def test_reviews_require_doctor_id(self, review_service, notifier):
        store = ReviewStore(review_service, notifier)

        result = store.fetch_collection()

        assert result.success is False
        review_service.get_doctor_reviews.assert_not_called()


class TestCreate:

    def test_create_appends_and_sets_current(self, appointments, notifier):
        before = len(appointments.appointments)

        result = appointments.create({"doctor": "d3"})

        assert result.data == {"_id": "a3", "status": "pending"}
        assert len(appointments.appointments) == before + 1
        assert appointments.appointments[-1] == {"_id": "a3", "status": "pending"}
        assert appointments.current_appointment == {"_id": "a3", "status": "pending"}
        assert notifier.successes == ["Appointment created successfully"]

    def test_create_failure_leaves_list(self, reviews, review_service, notifier):
        review_service.create.return_value = Failure(message="You have already reviewed this doctor")

        result = reviews.create({"doctor": "d1", "rating": 5})

        assert result.message == "You have already reviewed this doctor"
        assert reviews.reviews == ({"_id": "r1", "rating": 4},)
        assert reviews.state.error == "You have already reviewed this doctor"
        assert notifier.errors == ["You have already reviewed this doctor"]

    def test_create_exception_uses_resource_fallback(self, appointments, appointment_service, notifier):
        appointment_service.create.side_effect = RuntimeError()

        result = appointments.create({})

        assert result.message == "Failed to create appointment"
        assert notifier.errors == ["Failed to create appointment"]


class TestUpdate:

    def test_update_replaces_one_element(self, appointments):
        result = appointments.update_status("a1", {"status": "confirmed"})

        assert result.success is True
        assert appointments.appointments == (
            {"_id": "a1", "status": "confirmed"},
            APPOINTMENTS[1],
        )

    def test_update_does_not_refresh_current_appointment(self, appointments):
        appointments.set_current(APPOINTMENTS[0])

        appointments.update_status("a1", {"status": "confirmed"})

        assert appointments.current_appointment == APPOINTMENTS[0]

    def test_update_of_absent_id_leaves_list_unchanged(self, appointments, appointment_service):
        appointment_service.update_status.return_value = Success(data={"_id": "zzz", "status": "confirmed"})
        before = appointments.appointments

        appointments.update_status("zzz", {"status": "confirmed"})

        assert appointments.appointments == before

    def test_review_update_refreshes_current(self, reviews, notifier):
        reviews.update("r1", {"rating": 2})

        assert reviews.reviews == ({"_id": "r1", "rating": 2},)
        assert reviews.current_review == {"_id": "r1", "rating": 2}
        assert notifier.successes == ["Review updated successfully"]

    def test_update_failure_leaves_list(self, appointments, appointment_service):
        appointment_service.update_status.return_value = Failure(message="Invalid status")

        appointments.update_status("a1", {"status": "bogus"})

        assert appointments.appointments == tuple(APPOINTMENTS)
        assert appointments.state.error == "Invalid status"


class TestDelete:

    def test_delete_removes_element(self, appointments, notifier):
        result = appointments.remove("a2")

        assert result == Success(message="Appointment cancelled")
        assert appointments.appointments == (APPOINTMENTS[0],)
        assert notifier.successes == ["Appointment cancelled"]

    def test_delete_absent_id_reports_backend_error(self, appointments, appointment_service, notifier):
        appointment_service.delete.return_value = Failure(message="Appointment not found", status=404)

        result = appointments.remove("nope")

        appointment_service.delete.assert_called_once_with("nope")
        assert result.success is False
        assert appointments.appointments == tuple(APPOINTMENTS)
        assert notifier.errors == ["Appointment not found"]

    def test_review_delete_clears_current(self, reviews):
        reviews.set_current({"_id": "r1", "rating": 4})

        reviews.remove("r1")

        assert reviews.reviews == ()
        assert reviews.current_review is None


class TestCurrentAndErrors:

    def test_set_and_clear_current(self, appointments):
        appointments.set_current(APPOINTMENTS[1])
        assert appointments.current_appointment == APPOINTMENTS[1]

        appointments.clear_current()
        assert appointments.current_appointment is None

    def test_clear_error(self, appointments, appointment_service):
        appointment_service.delete.return_value = Failure(message="Nope")
        appointments.remove("a1")

        appointments.clear_error()

        assert appointments.state.error is None


class TestReducerProperties:

    def reducer(self):
        return make_resource_reducer()

    def test_start_resets_error(self):
        state = self.reducer()(ResourceState(error="old"), Action(ResourceAction.UPDATE_START))

        assert state.is_loading is True
        assert state.error is None

    def test_interleaved_mutations_commute_by_id(self):
        """Applying the same successes in either order yields the same items."""
        reducer = self.reducer()
        start = ResourceState(items=({"_id": "a1", "v": 0}, {"_id": "a2", "v": 0}))
        actions = [
            Action(ResourceAction.UPDATE_SUCCESS, {"_id": "a1", "v": 1}),
            Action(ResourceAction.DELETE_SUCCESS, "a2"),
        ]

        forward = start
        for action in actions:
            forward = reducer(forward, action)
        backward = start
        for action in reversed(actions):
            backward = reducer(backward, action)

        assert forward.items == backward.items == ({"_id": "a1", "v": 1},)


def test_concurrent_creates_all_land(appointment_service, notifier):
    """Parallel creates each append their own item; none are lost."""
    counter = iter(range(100))
    lock = threading.Lock()

    def create(data):
        with lock:
            n = next(counter)
        return Success(data={"_id": f"n{n}"})

    appointment_service.create.side_effect = create
    store = AppointmentStore(appointment_service, notifier)

    threads = [threading.Thread(target=store.create, args=({},)) for _ in range(20)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(store.appointments) == 20
    assert len({item["_id"] for item in store.appointments}) == 20
    assert store.state.is_loading is False


def test_subclass_missing_hooks_cannot_be_built(notifier):
    class FetchOnlyStore(ResourceStore):
        def _fetch(self, owner_id):
            return Success(data=[])

    with pytest.raises(TypeError):
        FetchOnlyStore(notifier)
