import unittest

from tests.utils.case import DatabaseTestCase


class ReportsApiTestCase(DatabaseTestCase):
    def test_create_report_under_existing_project(self):
        project_id = self._create_project()
        response = self.client.post(
            f"/projects/{project_id}/reports",
            json={"title": "Kickoff", "content": "Notes"},
        )
        self.assertEqual(response.status_code, 201)
        body = response.get_json()
        self.assertEqual(body["message"], "Report created")

        fetched = self.client.get(f"/reports/{body['id']}")
        self.assertEqual(fetched.status_code, 200)
        self.assertEqual(
            fetched.get_json(),
            {
                "id": body["id"],
                "project_id": project_id,
                "title": "Kickoff",
                "content": "Notes",
            },
        )

    def test_create_report_under_missing_project_returns_500(self):
        response = self.client.post("/projects/999/reports", json={"title": "Orphan"})
        self.assertEqual(response.status_code, 500)
        self.assertEqual(
            response.get_json(),
            {"error": "Failed to create report. Check if project exists."},
        )
        self.assertEqual(self.client.get("/reports").get_json(), [])

    def test_create_report_without_title_returns_500(self):
        project_id = self._create_project()
        response = self.client.post(f"/projects/{project_id}/reports", json={})
        self.assertEqual(response.status_code, 500)

    def test_get_missing_report_returns_404(self):
        response = self.client.get("/reports/7")
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.get_json(), {"error": "Report not found"})

    def test_list_reports_spans_projects(self):
        first = self._create_project(name="First")
        second = self._create_project(name="Second")
        self._create_report(first, title="A")
        self._create_report(second, title="B")

        reports = self.client.get("/reports").get_json()
        self.assertEqual(
            sorted((report["project_id"], report["title"]) for report in reports),
            [(first, "A"), (second, "B")],
        )

    def test_update_changes_title_and_content_only(self):
        project_id = self._create_project()
        other_id = self._create_project(name="Other")
        report_id = self._create_report(project_id, title="Draft", content="v1")

        response = self.client.put(
            f"/reports/{report_id}",
            json={"title": "Final", "content": "v2", "project_id": other_id},
        )
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.get_json(), {"message": "Report updated"})

        report = self.client.get(f"/reports/{report_id}").get_json()
        self.assertEqual(report["title"], "Final")
        self.assertEqual(report["content"], "v2")
        self.assertEqual(report["project_id"], project_id)

    def test_update_missing_report_is_silent(self):
        response = self.client.put("/reports/5", json={"title": "Ghost"})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(self.client.get("/reports/5").status_code, 404)

    def test_delete_report(self):
        project_id = self._create_project()
        report_id = self._create_report(project_id)

        response = self.client.delete(f"/reports/{report_id}")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.get_json(), {"message": "Report deleted"})
        self.assertEqual(self.client.get(f"/reports/{report_id}").status_code, 404)
        self.assertEqual(self.client.get(f"/projects/{project_id}").status_code, 200)

    def test_delete_missing_report_is_silent(self):
        self.assertEqual(self.client.delete("/reports/5").status_code, 200)

    def test_end_to_end_project_lifecycle(self):
        response = self.client.post("/projects", json={"name": "P1"})
        self.assertEqual(response.status_code, 201)
        self.assertEqual(response.get_json()["id"], 1)

        response = self.client.post("/projects/1/reports", json={"title": "R1"})
        self.assertEqual(response.status_code, 201)
        self.assertEqual(response.get_json()["id"], 1)

        self.assertEqual(self.client.delete("/projects/1").status_code, 200)
        self.assertEqual(self.client.get("/reports/1").status_code, 404)


if __name__ == "__main__":
    unittest.main()
