import os

import requests

API_BASE_URL = os.getenv('API_BASE_URL', 'http://localhost:3000')


class ApiError(Exception):
    def __init__(self, message, status_code=None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class ApiClient:
    def __init__(self, base_url=API_BASE_URL, token=None, session=None):
        self.base_url = base_url.rstrip('/')
        self.token = token
        self.session = session or requests.Session()

    def _headers(self):
        if self.token:
            return {"Authorization": f"Bearer {self.token}"}
        return {}

    def _request(self, method, path, **kwargs):
        response = self.session.request(method, f"{self.base_url}{path}", headers=self._headers(), **kwargs)
        if not response.ok:
            try:
                message = response.json().get("message")
            except ValueError:
                message = None
            raise ApiError(message or f"Request failed ({response.status_code})", response.status_code)
        return response.json()

    def register(self, username, email, password):
        return self._request("POST", "/api/register", json={
            "username": username,
            "email": email,
            "password": password,
        })

    def login(self, email, password):
        data = self._request("POST", "/api/login", json={"email": email, "password": password})
        self.token = data["token"]
        return data

    def list_questions(self):
        return self._request("GET", "/questions")

    def create_question(self, title, problem_statement, solution, topic):
        return self._request("POST", "/questions", json={
            "title": title,
            "problemStatement": problem_statement,
            "solution": solution,
            "topic": topic,
        })

    def update_question(self, question_id, **fields):
        return self._request("PUT", f"/questions/{question_id}", json=fields)

    def delete_question(self, question_id):
        return self._request("DELETE", f"/questions/{question_id}")
