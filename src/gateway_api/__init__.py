"""HTTP gateway for Google Drive uploads, Drive sharing and Razorpay orders."""
