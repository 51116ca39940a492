"""Interactive control panel."""
