"""DummyImage: placeholder images described by the request URL."""
