from internmatch.services.job_board import JOB_POSTINGS, filter_jobs, list_jobs, paginate


def ids(jobs):
    return [job["id"] for job in jobs]


def test_type_filter_is_exact():
    jobs = filter_jobs(JOB_POSTINGS, job_type="paid")
    assert ids(jobs) == ["1", "3"]
    assert all(job["type"] == "paid" for job in jobs)


def test_type_all_disables_filter():
    assert len(filter_jobs(JOB_POSTINGS, job_type="all")) == len(JOB_POSTINGS)


def test_search_covers_title_company_and_skills():
    assert ids(filter_jobs(JOB_POSTINGS, search="DATA SCIENCE")) == ["3"]
    assert ids(filter_jobs(JOB_POSTINGS, search="techcorp")) == ["1"]
    assert ids(filter_jobs(JOB_POSTINGS, search="figma")) == ["4"]


def test_search_and_type_combine():
    assert ids(filter_jobs(JOB_POSTINGS, search="social media", job_type="both")) == ["6"]


def test_pagination_second_page():
    result = list_jobs(limit=2, page=2)
    assert ids(result["jobs"]) == ["3", "4"]
    assert result["pagination"] == {"total": 6, "page": 2, "limit": 2, "total_pages": 3}


def test_page_past_the_end_is_empty():
    result = paginate(list(JOB_POSTINGS), page=5, limit=2)
    assert result["items"] == []
    assert result["pagination"]["total_pages"] == 3


# ============================================================
# GET /jobs
# ============================================================

def test_get_jobs_defaults(client):
    resp = client.get("/jobs")
    assert resp.status_code == 200
    body = resp.json()
    assert len(body["jobs"]) == 6
    assert body["pagination"] == {"total": 6, "page": 1, "limit": 50, "totalPages": 1}
    assert body["jobs"][0]["fullDescription"].startswith("We're looking for")
    assert body["jobs"][0]["postedDate"] == "2024-01-15"


def test_get_jobs_paginated(client):
    resp = client.get("/jobs", params={"limit": 2, "page": 2})
    body = resp.json()
    assert [job["id"] for job in body["jobs"]] == ["3", "4"]
    assert body["pagination"]["totalPages"] == 3


def test_get_jobs_type_paid(client):
    resp = client.get("/jobs", params={"type": "paid"})
    assert {job["type"] for job in resp.json()["jobs"]} == {"paid"}


def test_get_jobs_search(client):
    resp = client.get("/jobs", params={"search": "python"})
    assert [job["title"] for job in resp.json()["jobs"]] == ["Data Science Intern"]


def test_get_jobs_rejects_bad_paging(client):
    resp = client.get("/jobs", params={"page": 0})
    assert resp.status_code == 400
    assert resp.json()["details"][0]["field"] == "page"
