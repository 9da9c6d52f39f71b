"""Small class hierarchies showing the kinds of inheritance."""


class Animal:
    def eat(self) -> str:
        return "Eating..."


class Dog(Animal):
    def bark(self) -> str:
        return "Barking..."


class A:
    def show_a(self) -> str:
        return "Class A"


class B:
    def show_b(self) -> str:
        return "Class B"


class C(A, B):
    def show_c(self) -> str:
        return "Class C"


class Vehicle:
    def move(self) -> str:
        return "Moving..."


class Car(Vehicle):
    def drive(self) -> str:
        return "Driving car..."


class SportsCar(Car):
    def race(self) -> str:
        return "Racing sports car..."


class Base:
    def base_func(self) -> str:
        return "Base function"


class Derived1(Base):
    def derived1_func(self) -> str:
        return "Derived1 function"


class Derived2(Base):
    def derived2_func(self) -> str:
        return "Derived2 function"


class X:
    def show_x(self) -> str:
        return "Class X"


class Y(X):
    def show_y(self) -> str:
        return "Class Y"


class Z(X, A):
    def show_z(self) -> str:
        return "Class Z"


def demo() -> list[str]:
    """Return the messages produced by exercising each kind of inheritance."""
    dog = Dog()
    c = C()
    sports_car = SportsCar()
    d1, d2 = Derived1(), Derived2()
    z = Z()
    return [
        dog.eat(),
        dog.bark(),
        c.show_a(),
        c.show_b(),
        c.show_c(),
        sports_car.move(),
        sports_car.drive(),
        sports_car.race(),
        d1.base_func(),
        d1.derived1_func(),
        d2.base_func(),
        d2.derived2_func(),
        z.show_x(),
        z.show_a(),
        z.show_z(),
    ]