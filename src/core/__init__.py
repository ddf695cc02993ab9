"""Core of spannerly: domain types, pure tools and configuration."""
