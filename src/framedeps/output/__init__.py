"""Output layer — renders ServiceResult for humans, scripts, and pipes."""
