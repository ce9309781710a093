"""Pure helpers shared by the fetchers."""
