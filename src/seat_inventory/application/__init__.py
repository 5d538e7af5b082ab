"""Application – use-case building blocks (framework-agnostic)."""
