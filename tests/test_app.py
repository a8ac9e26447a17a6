"""
End-to-end tests driving app.py through Streamlit's AppTest harness.

Run with: pytest tests/test_app.py
"""

import datetime as dt
from pathlib import Path

import pytest
from streamlit.testing.v1 import AppTest

APP_PATH = str(Path(__file__).resolve().parents[1] / "app.py")


def _last_notification(at: AppTest):
    return at.session_state["pa_notifier"].items[-1]


@pytest.fixture
def app():
    return AppTest.from_file(APP_PATH, default_timeout=30)


@pytest.fixture
def logged_in(app):
    app.session_state["pa_authenticated"] = True
    return app


def _open(at: AppTest, path: str) -> AppTest:
    at.query_params["path"] = path
    return at.run()


class TestLogin:
    def test_valid_credentials_reach_dashboard(self, app):
        app.run()
        app.text_input(key="pa_login_username").input("admin")
        app.text_input(key="pa_login_password").input("admin123")
        app.button(key="pa_login_submit").click().run()

        assert not app.exception
        assert app.session_state["pa_authenticated"] is True
        assert _last_notification(app).title == "Login Successful"
        assert any(h.value == "Dashboard Overview" for h in app.subheader)

    def test_invalid_credentials_stay_on_login(self, app):
        app.run()
        app.text_input(key="pa_login_username").input("admin")
        app.text_input(key="pa_login_password").input("nope")
        app.button(key="pa_login_submit").click().run()

        assert not app.exception
        assert app.session_state["pa_authenticated"] is False
        note = _last_notification(app)
        assert note.title == "Login Failed"
        assert note.variant == "destructive"
        assert app.text_input(key="pa_login_username").value == "admin"

    def test_dashboard_requires_login(self, app):
        _open(app, "/dashboard/staff")
        assert not app.exception
        assert app.text_input(key="pa_login_username") is not None
        assert not any(h.value == "Dashboard Overview" for h in app.subheader)

    def test_logout_returns_to_login(self, logged_in):
        _open(logged_in, "/dashboard")
        logged_in.button(key="pa_logout").click().run()

        assert logged_in.session_state["pa_authenticated"] is False
        assert _last_notification(logged_in).title == "Logged Out"
        assert logged_in.text_input(key="pa_login_username") is not None


def test_unknown_path_renders_not_found(logged_in):
    _open(logged_in, "/dashboard/settings")
    assert not logged_in.exception
    assert logged_in.title[0].value == "404"


class TestManagementScreens:
    def test_add_internship(self, logged_in):
        _open(logged_in, "/dashboard/internships")
        logged_in.button(key="pa_internships_add").click().run()
        assert logged_in.button(key="pa_internships_submit").disabled

        logged_in.text_input(key="pa_internships_form_title").input("QA Intern")
        logged_in.text_input(key="pa_internships_form_company_name").input("Acme").run()
        assert not logged_in.button(key="pa_internships_submit").disabled
        logged_in.button(key="pa_internships_submit").click().run()

        assert not logged_in.exception
        internships = logged_in.session_state["pa_collections"]["internships"]
        assert len(internships) == 5
        assert internships.records[-1].title == "QA Intern"
        assert _last_notification(logged_in).title == "Internship Added"

    def test_edit_exam_data(self, logged_in):
        _open(logged_in, "/dashboard/dynamic-data")
        logged_in.button(key="pa_exam_data_edit_2").click().run()

        assert logged_in.date_input(key="pa_exam_data_form_exam_date").value == dt.date(2024, 11, 20)
        assert logged_in.text_input(key="pa_exam_data_form_timetable").value == "Final Exam Schedule.pdf"
        assert logged_in.button(key="pa_exam_data_submit").label == "Update"

        logged_in.text_input(key="pa_exam_data_form_timetable").input("Final Exam Schedule v2.pdf").run()
        logged_in.button(key="pa_exam_data_submit").click().run()

        assert not logged_in.exception
        exams = logged_in.session_state["pa_collections"]["exam_data"]
        assert len(exams) == 3
        edited = exams.records[1]
        assert edited.id == "2"
        assert edited.timetable == "Final Exam Schedule v2.pdf"
        assert edited.exam_date == "2024-11-20"
        assert edited.general_query == "Exam hall assignments will be posted soon"
        assert _last_notification(logged_in).title == "Data Updated"

    def test_edit_internship(self, logged_in):
        _open(logged_in, "/dashboard/internships")
        logged_in.button(key="pa_internships_edit_3").click().run()

        assert logged_in.text_input(key="pa_internships_form_title").value == "UI/UX Design Intern"
        assert logged_in.text_input(key="pa_internships_form_company_name").value == "DesignStudio Pro"

        logged_in.text_input(key="pa_internships_form_duration").input("5 months").run()
        logged_in.button(key="pa_internships_submit").click().run()

        assert not logged_in.exception
        internships = logged_in.session_state["pa_collections"]["internships"]
        assert len(internships) == 4
        edited = internships.records[2]
        assert edited.id == "3"
        assert edited.duration == "5 months"
        assert edited.title == "UI/UX Design Intern"
        assert edited.status == "Closed"
        assert edited.applicants == 18
        assert edited.posted_date == "2024-08-20"
        assert _last_notification(logged_in).title == "Internship Updated"
        assert not logged_in.session_state["pa_internships_form_open"]

    def test_delete_staff_member(self, logged_in):
        _open(logged_in, "/dashboard/staff")
        logged_in.button(key="pa_staff_delete_3").click().run()

        assert not logged_in.exception
        staff = logged_in.session_state["pa_collections"]["staff"]
        assert len(staff) == 4
        assert "3" not in staff
        note = _last_notification(logged_in)
        assert note.description == "Ms. Lisa Davis has been removed from the system."
        assert note.variant == "destructive"

    def test_change_application_status(self, logged_in):
        _open(logged_in, "/dashboard/applications")
        logged_in.selectbox(key="pa_applications_status_1").select("Done").run()

        assert not logged_in.exception
        applications = logged_in.session_state["pa_collections"]["applications"]
        assert applications.get("1").status == "Done"
        assert _last_notification(logged_in).description == "John Doe's application status changed to Done"

    def test_search_filters_exam_rows(self, logged_in):
        _open(logged_in, "/dashboard/dynamic-data")
        logged_in.text_input(key="pa_exam_data_search").input("final").run()

        assert not logged_in.exception
        delete_keys = {b.key for b in logged_in.button if b.key and b.key.startswith("pa_exam_data_delete_")}
        assert delete_keys == {"pa_exam_data_delete_2"}
