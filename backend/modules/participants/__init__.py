"""Participant registry: athletes and their institute, hostel and mess."""
