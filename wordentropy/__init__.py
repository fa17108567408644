"""Word and character entropy scoring with cross-validation against theory and linguistic norms."""
