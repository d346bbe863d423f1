"""Infrastructure: hosted backend client, repositories, and token verification."""
