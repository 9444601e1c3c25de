"""Runtime services shared by the hint and host layers."""
