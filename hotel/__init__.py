"""Hotel booking backend: accounts, room catalog, availability and bookings."""
