"""daily-checkin: morning check-in codes and attendance reports.

This package is organized by feature modules (admins, members, attendance,
reporting) with a thin Flask controller layer over service/repository layers.
"""
