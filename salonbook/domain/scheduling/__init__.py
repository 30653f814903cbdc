"""
Scheduling Domain

Availability for the public booking page:

- time_calculator.py      # Pure slot computation (day eligibility, hours window, slots)
- availability_service.py # Booked-slot annotation and the past-date guard
- repository.py           # Salon-scoped read queries
- router.py               # GET /salons/{salon_id}/professionals/{professional_id}/availability
"""
