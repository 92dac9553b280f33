"""Workforce attendance package.

Feature modules (geo, shifts, attendance, remote_requests, clockin, ...) each
carry a domain model, a repository protocol with a MySQL implementation, a
service layer and, where needed, a thin Flask controller.
"""
