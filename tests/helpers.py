def signup(client, email="ana@example.com", password="secret123", full_name="Ana Souza"):
    return client.post("/api/users", json={"fullName": full_name, "email": email, "password": password})


def login(client, email="ana@example.com", password="secret123"):
    return client.post("/api/login", json={"email": email, "password": password})
