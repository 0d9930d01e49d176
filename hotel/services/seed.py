"""Sample data used when a slot has never been written."""

SEEDED_AT = "2024-01-01T00:00:00Z"

SEED_ROOMS = [
    {
        "id": "1",
        "name": "Deluxe AC Suite",
        "type": "AC",
        "price": 3500,
        "capacity": 2,
        "amenities": ["Free WiFi", "AC", "TV", "Mini Bar", "Room Service", "Balcony"],
        "images": [
            "https://images.pexels.com/photos/271618/pexels-photo-271618.jpeg?auto=compress&cs=tinysrgb&w=800",
            "https://images.pexels.com/photos/164595/pexels-photo-164595.jpeg?auto=compress&cs=tinysrgb&w=800",
        ],
        "available": True,
        "description": "Luxurious AC suite with modern amenities and stunning city view.",
        "createdAt": SEEDED_AT,
        "updatedAt": SEEDED_AT,
    },
    {
        "id": "2",
        "name": "Standard AC Room",
        "type": "AC",
        "price": 2500,
        "capacity": 2,
        "amenities": ["Free WiFi", "AC", "TV", "Room Service"],
        "images": [
            "https://images.pexels.com/photos/271624/pexels-photo-271624.jpeg?auto=compress&cs=tinysrgb&w=800",
            "https://images.pexels.com/photos/6585759/pexels-photo-6585759.jpeg?auto=compress&cs=tinysrgb&w=800",
        ],
        "available": True,
        "description": "Comfortable AC room perfect for business and leisure travelers.",
        "createdAt": SEEDED_AT,
        "updatedAt": SEEDED_AT,
    },
    {
        "id": "3",
        "name": "Economy Non-AC Room",
        "type": "Non-AC",
        "price": 1500,
        "capacity": 2,
        "amenities": ["Free WiFi", "Fan", "TV", "Attached Bathroom"],
        "images": [
            "https://images.pexels.com/photos/1579253/pexels-photo-1579253.jpeg?auto=compress&cs=tinysrgb&w=800",
            "https://images.pexels.com/photos/1329711/pexels-photo-1329711.jpeg?auto=compress&cs=tinysrgb&w=800",
        ],
        "available": True,
        "description": "Budget-friendly room with essential amenities for comfortable stay.",
        "createdAt": SEEDED_AT,
        "updatedAt": SEEDED_AT,
    },
]

SEED_HALLS = [
    {
        "id": "1",
        "name": "Grand Ballroom",
        "capacity": 200,
        "price": 25000,
        "amenities": ["Sound System", "Projector", "Stage", "AC", "Catering Service", "Decoration"],
        "images": [
            "https://images.pexels.com/photos/169198/pexels-photo-169198.jpeg?auto=compress&cs=tinysrgb&w=800",
            "https://images.pexels.com/photos/1395964/pexels-photo-1395964.jpeg?auto=compress&cs=tinysrgb&w=800",
        ],
        "available": True,
        "description": "Elegant ballroom perfect for weddings, conferences, and grand celebrations.",
        "createdAt": SEEDED_AT,
        "updatedAt": SEEDED_AT,
    },
    {
        "id": "2",
        "name": "Crystal Hall",
        "capacity": 100,
        "price": 15000,
        "amenities": ["Sound System", "AC", "Stage", "Lighting", "Catering Service"],
        "images": [
            "https://images.pexels.com/photos/1395967/pexels-photo-1395967.jpeg?auto=compress&cs=tinysrgb&w=800",
            "https://images.pexels.com/photos/1024248/pexels-photo-1024248.jpeg?auto=compress&cs=tinysrgb&w=800",
        ],
        "available": True,
        "description": "Mid-size hall ideal for corporate events, birthday parties, and family gatherings.",
        "createdAt": SEEDED_AT,
        "updatedAt": SEEDED_AT,
    },
]

SEED_REVIEWS = [
    {
        "id": "1",
        "customerName": "Sarah Johnson",
        "rating": 5,
        "comment": "Exceptional service and beautiful rooms! The AC suite was spotless and the staff was incredibly helpful.",
        "image": "https://images.pexels.com/photos/1036623/pexels-photo-1036623.jpeg?auto=compress&cs=tinysrgb&w=400",
        "date": "2024-01-15",
        "roomType": "Deluxe AC Suite",
        "approved": True,
        "createdAt": SEEDED_AT,
        "updatedAt": SEEDED_AT,
    },
    {
        "id": "2",
        "customerName": "Mike Chen",
        "rating": 4,
        "comment": "Great value for money. The party hall was perfect for our corporate event.",
        "image": "https://images.pexels.com/photos/1043474/pexels-photo-1043474.jpeg?auto=compress&cs=tinysrgb&w=400",
        "date": "2024-01-20",
        "roomType": "Crystal Hall",
        "approved": True,
        "createdAt": SEEDED_AT,
        "updatedAt": SEEDED_AT,
    },
]

SEED_SETTINGS = {
    "hotelName": "Hotel Infinity",
    "address": "123 Luxury Avenue, City Center, State 12345",
    "phone": "+1 (555) 123-4567",
    "email": "info@hotelinfinity.com",
    "description": (
        "Experience luxury and comfort at Hotel Infinity. We provide exceptional hospitality "
        "with world-class amenities in the heart of the city."
    ),
    "checkInTime": "15:00",
    "checkOutTime": "11:00",
    "cancellationPolicy": (
        "Free cancellation up to 24 hours before check-in. After that, one night charge applies."
    ),
    "taxRate": 18,
}
