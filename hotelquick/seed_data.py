"""Fixed initial datasets written on first access to an empty store."""
from hotelquick.core.security import hash_password

SEED_HOTELS = [
    {
        "id": "1",
        "name": "The Ritz-Carlton Jakarta",
        "description": "Experience luxury at its finest in the heart of Jakarta with world-class amenities and impeccable service.",
        "address": "Jl. DR IDE Anak Agung Gde Agung Kav.E.1.1 No.1, Mega Kuningan, Jakarta",
        "price": 3500000,  # IDR
        "rating": 4.8,
        "image": "https://images.unsplash.com/photo-1566073771259-6a8506099945?ixlib=rb-4.0.3&auto=format&fit=crop&w=800&q=80",
        "rooms": 120,
        "amenities": ["Pool", "Spa", "Gym", "Restaurant", "Bar", "Room service", "Free WiFi"],
        "providerId": "provider-1",
    },
    {
        "id": "2",
        "name": "Ayana Resort Bali",
        "description": "A stunning clifftop retreat overlooking the Indian Ocean, offering ultimate luxury and Balinese hospitality.",
        "address": "Jl. Karang Mas Sejahtera, Jimbaran, Bali",
        "price": 2800000,
        "rating": 4.9,
        "image": "https://images.unsplash.com/photo-1551882547-ff40c63fe5fa?ixlib=rb-4.0.3&auto=format&fit=crop&w=800&q=80",
        "rooms": 75,
        "amenities": ["Private Beach", "Infinity Pool", "Spa", "Multiple Restaurants", "Bar", "Rock Bar"],
        "providerId": "provider-1",
    },
    {
        "id": "3",
        "name": "Mandarin Oriental Jakarta",
        "description": "Contemporary luxury hotel in the heart of Jakarta's financial and diplomatic district.",
        "address": "Jl. M.H. Thamrin, Jakarta Pusat",
        "price": 4200000,
        "rating": 4.7,
        "image": "https://images.unsplash.com/photo-1618773928121-c32242e63f44d?ixlib=rb-4.0.3&auto=format&fit=crop&w=800&q=80",
        "rooms": 50,
        "amenities": ["Pool", "Spa", "Gym", "Restaurant", "Bar", "Room service", "Free WiFi", "Business center"],
        "providerId": "provider-1",
    },
    {
        "id": "4",
        "name": "Four Seasons Resort Jimbaran",
        "description": "Luxurious beachfront villas with traditional Balinese architecture and modern amenities.",
        "address": "Jimbaran Bay, Bali",
        "price": 5500000,
        "rating": 4.9,
        "image": "https://images.unsplash.com/photo-1571896349842-33c89424de2d?ixlib=rb-4.0.3&auto=format&fit=crop&w=800&q=80",
        "rooms": 200,
        "amenities": ["Private beach", "Pool", "Spa", "Gym", "Multiple restaurants", "Water sports"],
        "providerId": "provider-1",
    },
    {
        "id": "5",
        "name": "Hotel Indonesia Kempinski Jakarta",
        "description": "Historic luxury hotel with modern amenities in the heart of Jakarta.",
        "address": "Jl. M.H. Thamrin No.1, Jakarta Pusat",
        "price": 2900000,
        "rating": 4.6,
        "image": "https://images.unsplash.com/photo-1519449556851-5720b33024e7?ixlib=rb-4.0.3&auto=format&fit=crop&w=800&q=80",
        "rooms": 150,
        "amenities": ["Restaurant", "Bar", "Spa", "Free WiFi", "Room service", "Concierge"],
        "providerId": "provider-1",
    },
    {
        "id": "6",
        "name": "Mulia Resort Nusa Dua",
        "description": "Luxurious beachfront resort with world-class facilities and impeccable service.",
        "address": "Jl. Raya Nusa Dua Selatan, Kawasan Sawangan, Nusa Dua, Bali",
        "price": 3800000,
        "rating": 4.8,
        "image": "https://images.unsplash.com/photo-1520250497591-112f2f40a3f4?ixlib=rb-4.0.3&auto=format&fit=crop&w=800&q=80",
        "rooms": 100,
        "amenities": ["Private Beach", "Multiple Pools", "Spa", "Restaurants", "Beach Club", "Fitness Center"],
        "providerId": "provider-1",
    },
]

SEED_BOOKINGS = [
    {
        "id": "1",
        "hotelId": "1",
        "consumerId": "consumer-1",
        "checkIn": "2025-05-01",
        "checkOut": "2025-05-05",
        "guests": 2,
        "status": "pending",
        "totalPrice": 1000,
        "createdAt": "2025-04-01T12:00:00Z",
    },
    {
        "id": "2",
        "hotelId": "3",
        "consumerId": "consumer-1",
        "checkIn": "2025-06-10",
        "checkOut": "2025-06-15",
        "guests": 1,
        "status": "confirmed",
        "totalPrice": 1750,
        "createdAt": "2025-04-05T09:30:00Z",
    },
    {
        "id": "3",
        "hotelId": "2",
        "consumerId": "consumer-1",
        "checkIn": "2025-07-20",
        "checkOut": "2025-07-25",
        "guests": 3,
        "status": "rejected",
        "totalPrice": 750,
        "createdAt": "2025-04-10T15:45:00Z",
    },
]

# One account per role. Only the hash of the demo password is kept.
SEED_ACCOUNTS = {
    "consumer": {
        "id": "consumer-1",
        "name": "John Doe",
        "email": "consumer@example.com",
        "role": "consumer",
        "password_hash": hash_password("password123"),
    },
    "provider": {
        "id": "provider-1",
        "name": "Hotel Manager",
        "email": "provider@example.com",
        "role": "provider",
        "password_hash": hash_password("password123"),
    },
}
