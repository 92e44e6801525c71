from dataclasses import dataclass


@dataclass(frozen=True)
class Transaction:
    id: int
    name: str
    description: str
    date_time: str | None
    price: float

    @classmethod
    def from_row(cls, row) -> "Transaction":
        return cls(
            id=int(row["id"]),
            name=row["name"],
            description=row["description"],
            date_time=row["date_time"],
            price=float(row["price"]),
        )

    @classmethod
    def from_dict(cls, data: dict) -> "Transaction":
        return cls(
            id=data["id"],
            name=data.get("name") or "",
            description=data.get("description") or "",
            date_time=data.get("dateTime"),
            price=data.get("price"),
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "dateTime": self.date_time,
            "price": self.price,
        }
