PENDING = "pending"
