"""
API tests for the lecturer GraphQL endpoint
"""
LECTURER_FIELDS = "lecturerId lecturerName address department email phone courseHandled"

CREATE = """
mutation Create($name: String!, $email: String!, $department: String, $phone: String) {
  createLecturer(lecturerName: $name, email: $email, department: $department, phone: $phone) {
    %s
  }
}
""" % LECTURER_FIELDS


def gql(client, query, **variables):
    response = client.post("/graphql", json={"query": query, "variables": variables})
    assert response.status_code == 200, response.text
    return response.json()


def create(client, **variables):
    variables.setdefault("name", "John Doe")
    variables.setdefault("email", "john@x.com")
    body = gql(client, CREATE, **variables)
    assert "errors" not in body, body
    return body["data"]["createLecturer"]


def test_create_lecturer_mutation(client):
    lecturer = create(client, department="CS", phone="555")

    assert lecturer["lecturerId"] is not None
    assert lecturer["lecturerName"] == "John Doe"
    assert lecturer["department"] == "CS"
    assert lecturer["phone"] == "555"
    assert lecturer["courseHandled"] is None


def test_created_lecturer_visible_over_rest(client):
    lecturer = create(client)

    response = client.get(f"/api/v1/lecturers/{lecturer['lecturerId']}")

    assert response.status_code == 200
    assert response.json()["email"] == "john@x.com"


def test_get_all_and_by_id(client):
    first = create(client, email="a@x.com")
    second = create(client, email="b@x.com")

    body = gql(client, "{ getAllLecturers { %s } }" % LECTURER_FIELDS)
    assert body["data"]["getAllLecturers"] == [first, second]

    query = "query One($id: Int!) { getLecturerById(id: $id) { lecturerName email } }"
    body = gql(client, query, id=second["lecturerId"])
    assert body["data"]["getLecturerById"] == {"lecturerName": "John Doe", "email": "b@x.com"}


def test_get_missing_lecturer_is_null(client):
    body = gql(client, "{ getLecturerById(id: 999) { lecturerId } }")

    assert body["data"]["getLecturerById"] is None
    assert "errors" not in body


def test_find_by_department(client):
    cs = create(client, email="cs@x.com", department="Computer Science")
    create(client, email="ee@x.com", department="Electrical")

    query = 'query { findLecturersByDepartment(department: "Computer Science") { %s } }' % LECTURER_FIELDS
    body = gql(client, query)

    assert body["data"]["findLecturersByDepartment"] == [cs]


def test_update_lecturer_mutation_replaces_fields(client):
    lecturer = create(client, department="CS", phone="555")
    mutation = """
    mutation Update($id: Int!) {
      updateLecturer(id: $id, lecturerName: "John Doe Updated", email: "john2@x.com", department: "SE") {
        %s
      }
    }
    """ % LECTURER_FIELDS

    body = gql(client, mutation, id=lecturer["lecturerId"])

    updated = body["data"]["updateLecturer"]
    assert updated["lecturerId"] == lecturer["lecturerId"]
    assert updated["lecturerName"] == "John Doe Updated"
    assert updated["email"] == "john2@x.com"
    assert updated["department"] == "SE"
    assert updated["phone"] is None


def test_update_missing_lecturer_reports_error(client):
    mutation = 'mutation { updateLecturer(id: 5, lecturerName: "X", email: "x@x.com") { lecturerId } }'

    body = gql(client, mutation)

    assert body["data"] is None
    assert body["errors"][0]["message"] == "Lecturer not found with id 5"


def test_duplicate_email_reports_error(client):
    create(client)

    body = gql(client, CREATE, name="Other", email="john@x.com")

    assert body["data"] is None
    assert "already exists" in body["errors"][0]["message"]


def test_delete_lecturer_mutation(client):
    lecturer = create(client)
    mutation = "mutation Delete($id: Int!) { deleteLecturer(id: $id) }"

    body = gql(client, mutation, id=lecturer["lecturerId"])
    assert body["data"]["deleteLecturer"] == "Lecturer deleted successfully!"

    # deleting again still confirms
    body = gql(client, mutation, id=lecturer["lecturerId"])
    assert body["data"]["deleteLecturer"] == "Lecturer deleted successfully!"

    body = gql(client, "query One($id: Int!) { getLecturerById(id: $id) { lecturerId } }", id=lecturer["lecturerId"])
    assert body["data"]["getLecturerById"] is None
