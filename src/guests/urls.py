SUBMIT_RSVP_URL = "/api/v1/rsvp"
