from backend.models.school_class import SchoolClass
from backend.models.user import User
from backend.routes.report_routes import rank_top_classes, rank_top_instructors


def _class(class_id: int, total_enrolled: int, status: str = 'approved', instructor_email: str = 'a@x.com'):
    return SchoolClass(
        id=class_id,
        name=f'Class {class_id}',
        total_enrolled=total_enrolled,
        status=status,
        instructor_email=instructor_email,
        extra={},
    )


def _instructor(user_id: int, email: str) -> User:
    return User(id=user_id, email=email, role='instructor', extra={})


def test_rank_top_classes_keeps_six_approved_by_enrollment() -> None:
    classes = [_class(index, index * 3) for index in range(1, 9)]
    classes.append(_class(99, 1000, status='pending'))

    ranked = rank_top_classes(classes)

    assert [school_class.id for school_class in ranked] == [8, 7, 6, 5, 4, 3]


def test_rank_top_classes_breaks_ties_by_store_order() -> None:
    classes = [_class(1, 5), _class(2, 9), _class(3, 5)]

    ranked = rank_top_classes(classes)

    assert [school_class.id for school_class in ranked] == [2, 1, 3]


def test_rank_top_instructors_sums_enrollment_per_instructor() -> None:
    instructors = [_instructor(1, 'a@x.com'), _instructor(2, 'b@x.com'), _instructor(3, 'c@x.com')]
    classes = [
        _class(1, 10, instructor_email='a@x.com'),
        _class(2, 15, instructor_email='b@x.com'),
        _class(3, 4, instructor_email='a@x.com'),
    ]

    ranked = rank_top_instructors(instructors, classes)

    assert [(summary['email'], summary['totalEnrolled'], summary['classCount']) for summary in ranked] == [
        ('b@x.com', 15, 1),
        ('a@x.com', 14, 2),
        ('c@x.com', 0, 0),
    ]
    assert ranked[1]['classNames'] == ['Class 1', 'Class 3']


def test_rank_top_instructors_limits_to_six() -> None:
    instructors = [_instructor(index, f'{index}@x.com') for index in range(1, 10)]

    assert len(rank_top_instructors(instructors, [])) == 6


def test_top_classes_route(client, make_class) -> None:
    for index in range(8):
        make_class(f'Class {index}', total_enrolled=index)
    make_class('Pending', status='pending', total_enrolled=500)

    response = client.get('/topclasses')

    assert response.status_code == 200
    names = [item['name'] for item in response.json()]
    assert names == ['Class 7', 'Class 6', 'Class 5', 'Class 4', 'Class 3', 'Class 2']


def test_top_instructor_route(client, make_user, make_class) -> None:
    make_user('quiet@example.edu', role='instructor')
    make_user('popular@example.edu', role='instructor', name='Popular')
    make_user('student@example.edu', role='student')
    make_class('Drums', instructor_email='popular@example.edu', total_enrolled=20)

    response = client.get('/topInstructor')

    body = response.json()
    assert [item['email'] for item in body] == ['popular@example.edu', 'quiet@example.edu']
    assert body[0]['name'] == 'Popular'
    assert body[0]['totalEnrolled'] == 20
