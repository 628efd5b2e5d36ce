"""Output layer — Rich rendering of ServiceResult for humans."""
